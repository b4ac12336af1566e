"""Effective configuration resolution"""

import logging
from typing import Any, Dict, List, Optional

from ..api.exceptions import (
    InvalidEnvironmentError,
    MissingRequiredFieldError,
    SameSourceDestinationError,
)
from ..constants import KEY_SOURCE, KEY_DESTINATION, MSG_USING_DEFAULT, MSG_USING_ENVIRONMENT
from ..models.config import (
    DeploymentConfig,
    LegacyConfig,
    RawConfig,
    StructuredConfig,
    canonical_name,
)

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Merges the default configuration with an environment override

    Resolution is pure: the raw configuration is never modified and the
    returned ``DeploymentConfig`` is validated before it is handed out.
    """

    def environment_names(self, raw: RawConfig) -> List[str]:
        """List valid environment names in canonical case

        Args:
            raw: Parsed raw configuration

        Returns:
            Environment names (empty for legacy configurations)
        """
        if isinstance(raw, StructuredConfig):
            return raw.environment_names
        return []

    def resolve(self, raw: RawConfig, environment: Optional[str] = None) -> DeploymentConfig:
        """Build the effective configuration for one run

        Args:
            raw: Parsed raw configuration
            environment: Requested environment name (any case), or None
                to use the default section

        Returns:
            Validated effective configuration

        Raises:
            InvalidEnvironmentError: If the environment is not defined
            MissingRequiredFieldError: If source or destination is missing
            SameSourceDestinationError: If source equals destination
        """
        merged = self.merge(raw, environment)
        config = DeploymentConfig.from_dict(merged)
        self.validate(config)
        return config

    def merge(self, raw: RawConfig, environment: Optional[str] = None) -> Dict[str, Any]:
        """Shallow-merge the selected environment over the default section"""
        valid_names = self.environment_names(raw)

        if environment is not None and canonical_name(environment) not in valid_names:
            raise InvalidEnvironmentError(canonical_name(environment), valid_names)

        if isinstance(raw, LegacyConfig):
            logger.debug("Using flat configuration")
            return dict(raw.fields)

        merged = dict(raw.default)
        if environment is not None:
            logger.info(MSG_USING_ENVIRONMENT.format(environment=canonical_name(environment)))
            merged.update(raw.get_override(environment))
        else:
            logger.info(MSG_USING_DEFAULT)

        return merged

    def validate(self, config: DeploymentConfig) -> None:
        """Check the invariants of an effective configuration"""
        missing = [
            key for key, value in ((KEY_SOURCE, config.source), (KEY_DESTINATION, config.destination))
            if not value
        ]
        if missing:
            raise MissingRequiredFieldError(missing)

        if config.source == config.destination:
            raise SameSourceDestinationError(config.source)


def resolve_config(raw: RawConfig, environment: Optional[str] = None) -> DeploymentConfig:
    """Resolve an effective configuration (convenience function)"""
    return ConfigResolver().resolve(raw, environment)
