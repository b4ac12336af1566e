"""Data models for shipshape"""

from .config import (
    DeploymentConfig,
    LegacyConfig,
    StructuredConfig,
    RawConfig,
    parse_raw_config,
    canonical_name,
)
from .result import (
    OperationStatus,
    ErrorDetail,
    Result,
    PhaseResult,
    DeployResult,
)

__all__ = [
    # Config models
    "DeploymentConfig",
    "LegacyConfig",
    "StructuredConfig",
    "RawConfig",
    "parse_raw_config",
    "canonical_name",

    # Result models
    "OperationStatus",
    "ErrorDetail",
    "Result",
    "PhaseResult",
    "DeployResult",
]
