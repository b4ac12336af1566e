"""shipshape - a local deployment orchestrator.

Runs pre-deploy commands, replaces the contents of a destination directory
with a source directory while keeping an allow-list of existing entries,
then runs post-deploy commands, with per-environment configuration.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Exceptions
from .api.exceptions import (
    ShipshapeError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    InvalidConfigError,
    InvalidEnvironmentError,
    MissingRequiredFieldError,
    SameSourceDestinationError,
    DeployError,
    SourceNotFoundError,
    ReconcileError,
    CopyError,
    CommandFailedError,
)

# Core API
from .api.deployer import Deployer, deploy

# Data models
from .models import DeploymentConfig, DeployResult, parse_raw_config

# Core components
from .core import (
    ConfigResolver,
    resolve_config,
    is_network_path,
    DirectoryReconciler,
    CommandExecutor,
    ShellCommandExecutor,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Deployer",
    "ConfigResolver",
    "DirectoryReconciler",
    "CommandExecutor",
    "ShellCommandExecutor",

    # Core API functions
    "deploy",
    "resolve_config",
    "is_network_path",
    "parse_raw_config",

    # Data models
    "DeploymentConfig",
    "DeployResult",

    # Exceptions
    "ShipshapeError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "InvalidConfigError",
    "InvalidEnvironmentError",
    "MissingRequiredFieldError",
    "SameSourceDestinationError",
    "DeployError",
    "SourceNotFoundError",
    "ReconcileError",
    "CopyError",
    "CommandFailedError",
]
