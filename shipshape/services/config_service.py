"""Configuration loading service"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from ..api.exceptions import ConfigNotFoundError, ConfigParseError
from ..constants import CONFIG_FILE, YAML_SUFFIXES
from ..core.config_resolver import ConfigResolver
from ..core.path_resolver import PathResolver
from ..models.config import DeploymentConfig, RawConfig, parse_raw_config

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for reading the deployment configuration file"""

    def __init__(self, project_root: Optional[Union[str, Path]] = None,
                 config_file: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            project_root: Invocation root (defaults to the current directory)
            config_file: Explicit configuration file; when omitted the
                first of the known file names present in project_root
                is used
        """
        self.path_resolver = PathResolver(project_root)
        self.resolver = ConfigResolver()

        if config_file is not None:
            self.config_path = self.path_resolver.resolve(config_file)
        else:
            self.config_path = (self.path_resolver.find_config_file()
                                or self.path_resolver.resolve(CONFIG_FILE))

        self._raw: Optional[RawConfig] = None

    @property
    def project_root(self) -> Path:
        return self.path_resolver.invocation_root

    @property
    def raw(self) -> RawConfig:
        """Get parsed configuration (lazy load)"""
        if self._raw is None:
            self.load()
        return self._raw

    def load(self) -> RawConfig:
        """Load and parse the configuration file

        Returns:
            Parsed raw configuration

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigParseError: If the file cannot be read or decoded
            InvalidConfigError: If the decoded document has the wrong shape
        """
        if not self.config_path.is_file():
            raise ConfigNotFoundError(self.config_path.name)

        logger.debug(f"Loading configuration from {self.config_path}")
        data = self._read(self.config_path)
        self._raw = parse_raw_config(data)
        return self._raw

    def environment_names(self) -> List[str]:
        """Environment names defined in the configuration file"""
        return self.resolver.environment_names(self.raw)

    def resolve(self, environment: Optional[str] = None) -> DeploymentConfig:
        """Load the file and resolve the effective configuration"""
        return self.resolver.resolve(self.raw, environment)

    @staticmethod
    def _read(path: Path) -> Any:
        try:
            with open(path, 'r', encoding='utf-8-sig') as f:
                if path.suffix.lower() in YAML_SUFFIXES:
                    return yaml.safe_load(f)
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigParseError(path.name, str(e)) from e
