"""Exception definitions for shipshape API"""

from typing import List, Optional

from ..constants import ErrorCode


class ShipshapeError(Exception):
    """Base exception for shipshape"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(ShipshapeError):
    """Configuration error"""
    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found"""

    def __init__(self, config_path: str):
        message = (
            f"{config_path} not found.\n"
            "Please create this file to specify deployment settings."
        )
        super().__init__(message, ErrorCode.CONFIG_NOT_FOUND)
        self.config_path = config_path


class ConfigParseError(ConfigError):
    """Configuration file could not be read or decoded"""

    def __init__(self, config_path: str, reason: str):
        message = f"Error reading or parsing {config_path}: {reason}"
        super().__init__(message, ErrorCode.CONFIG_PARSE_ERROR)
        self.config_path = config_path
        self.reason = reason


class InvalidConfigError(ConfigError):
    """Configuration has the wrong shape or field types"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_INVALID)


class InvalidEnvironmentError(ConfigError):
    """Requested environment is not defined in the configuration"""

    def __init__(self, environment: str, valid_environments: List[str]):
        lines = [f'Invalid environment "{environment}".']
        if valid_environments:
            lines.append(f"Valid environments are: {', '.join(valid_environments)}")
        else:
            lines.append("No environments defined in the configuration file.")
        super().__init__("\n".join(lines), ErrorCode.INVALID_ENVIRONMENT)
        self.environment = environment
        self.valid_environments = list(valid_environments)


class MissingRequiredFieldError(ConfigError):
    """Mandatory configuration fields are absent after merge"""

    def __init__(self, fields: List[str]):
        names = " and ".join(f'"{name}"' for name in fields)
        message = f"{names} {'is' if len(fields) == 1 else 'are'} mandatory in the configuration."
        super().__init__(message, ErrorCode.MISSING_REQUIRED_FIELD)
        self.fields = list(fields)


class SameSourceDestinationError(ConfigError):
    """Source and destination are the same string"""

    def __init__(self, path: str):
        super().__init__(
            f'"source" and "destination" cannot be the same ({path}).',
            ErrorCode.SAME_SOURCE_DESTINATION
        )
        self.path = path


class DeployError(ShipshapeError):
    """Deployment operation error"""
    pass


class SourceNotFoundError(DeployError):
    """Resolved source directory does not exist"""

    def __init__(self, source_path: str, reason: str = "not found"):
        super().__init__(
            f'Source directory {reason} at "{source_path}"',
            ErrorCode.SOURCE_NOT_FOUND
        )
        self.source_path = source_path


class ReconcileError(DeployError):
    """Emptying the destination directory failed"""

    def __init__(self, dir_path: str, reason: str):
        super().__init__(
            f"Failed to empty directory with keep list: {reason}",
            ErrorCode.RECONCILE_FAILED
        )
        self.dir_path = dir_path
        self.reason = reason


class CopyError(DeployError):
    """Copying the source tree into the destination failed"""

    def __init__(self, source_path: str, destination_path: str, reason: str):
        super().__init__(
            f"Failed to copy {source_path} to {destination_path}: {reason}",
            ErrorCode.COPY_FAILED
        )
        self.source_path = source_path
        self.destination_path = destination_path
        self.reason = reason


class CommandFailedError(DeployError):
    """A pre- or post-deploy command exited non-zero or failed to start"""

    def __init__(self, command: str, exit_code: Optional[int] = None,
                 cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"Command failed to start: {command} ({cause})"
        else:
            message = f"Command failed: {command} (exit code {exit_code})"
        super().__init__(message, ErrorCode.COMMAND_FAILED)
        self.command = command
        self.exit_code = exit_code
        self.cause = cause


class UnsupportedPlatformError(ShipshapeError):
    """Entry point invoked on a platform the tool does not support"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.UNSUPPORTED_PLATFORM)
