"""API layer for shipshape"""

from .exceptions import (
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
    UnsupportedPlatformError,
)
from .deployer import Deployer, deploy

__all__ = [
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",

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
    "UnsupportedPlatformError",
]
