"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Union

from ..api.exceptions import InvalidConfigError
from ..constants import (
    KEY_DEFAULT,
    KEY_ENVIRONMENTS,
    KEY_SOURCE,
    KEY_DESTINATION,
    KEY_PRE_DEPLOY,
    KEY_POST_DEPLOY,
    KEY_KEEP_LIST,
)

KNOWN_KEYS = (KEY_SOURCE, KEY_DESTINATION, KEY_PRE_DEPLOY, KEY_POST_DEPLOY, KEY_KEEP_LIST)


def canonical_name(name: str) -> str:
    """Canonical case used for environment names and keep-list tokens"""
    return name.upper()


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidConfigError(f'"{key}" must be a list of strings')
    return list(value)


def _optional_string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidConfigError(f'"{key}" must be a string')
    return value


@dataclass(frozen=True)
class DeploymentConfig:
    """Effective configuration for one deployment run"""

    source: str
    destination: str
    pre_deploy: List[str] = field(default_factory=list)
    post_deploy: List[str] = field(default_factory=list)
    keep_list: List[str] = field(default_factory=list)

    # Keys the file carried that shipshape does not use
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate keep-list tokens"""
        for token in self.keep_list:
            if "/" in token or "\\" in token:
                raise InvalidConfigError(
                    f'"{KEY_KEEP_LIST}" entries must be plain names, got "{token}"'
                )

    @property
    def keep_set(self) -> FrozenSet[str]:
        """Keep-list tokens in canonical case"""
        return frozenset(canonical_name(token) for token in self.keep_list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the file's key names"""
        data = dict(self.extra)
        data.update({
            KEY_SOURCE: self.source,
            KEY_DESTINATION: self.destination,
            KEY_PRE_DEPLOY: list(self.pre_deploy),
            KEY_POST_DEPLOY: list(self.post_deploy),
            KEY_KEEP_LIST: list(self.keep_list),
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeploymentConfig':
        """Create from a merged configuration dictionary

        Missing ``source``/``destination`` become empty strings; the
        resolver reports them as missing fields.
        """
        return cls(
            source=_optional_string(data, KEY_SOURCE),
            destination=_optional_string(data, KEY_DESTINATION),
            pre_deploy=_string_list(data, KEY_PRE_DEPLOY),
            post_deploy=_string_list(data, KEY_POST_DEPLOY),
            keep_list=_string_list(data, KEY_KEEP_LIST),
            extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
        )


@dataclass
class LegacyConfig:
    """Flat configuration object (no environments)"""

    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StructuredConfig:
    """Configuration with a default section and environment overrides"""

    default: Dict[str, Any] = field(default_factory=dict)
    environments: Optional[Dict[str, Dict[str, Any]]] = None

    @property
    def environment_names(self) -> List[str]:
        """Valid environment names in canonical case, in file order"""
        return [canonical_name(name) for name in (self.environments or {})]

    def get_override(self, environment: str) -> Optional[Dict[str, Any]]:
        """Find an environment override regardless of the name's case"""
        wanted = canonical_name(environment)
        for name, override in (self.environments or {}).items():
            if canonical_name(name) == wanted:
                return override
        return None


RawConfig = Union[LegacyConfig, StructuredConfig]


def parse_raw_config(data: Any) -> RawConfig:
    """Discriminate a decoded configuration file into one of the two shapes

    Args:
        data: Decoded JSON/YAML document

    Returns:
        LegacyConfig or StructuredConfig

    Raises:
        InvalidConfigError: If the document does not have a usable shape
    """
    if not isinstance(data, dict):
        raise InvalidConfigError("Configuration must be an object")

    if KEY_DEFAULT not in data and KEY_ENVIRONMENTS not in data:
        return LegacyConfig(fields=dict(data))

    default = data.get(KEY_DEFAULT)
    if default is None:
        default = {}
    if not isinstance(default, dict):
        raise InvalidConfigError(f'"{KEY_DEFAULT}" must be an object')

    environments = data.get(KEY_ENVIRONMENTS)
    if environments is not None:
        if not isinstance(environments, dict):
            raise InvalidConfigError(f'"{KEY_ENVIRONMENTS}" must be an object')

        seen = {}
        for name, override in environments.items():
            if not isinstance(override, dict):
                raise InvalidConfigError(f'Environment "{name}" must be an object')
            canonical = canonical_name(name)
            if canonical in seen:
                raise InvalidConfigError(
                    f'Environments "{seen[canonical]}" and "{name}" differ only by case'
                )
            seen[canonical] = name

    return StructuredConfig(default=dict(default), environments=environments)
