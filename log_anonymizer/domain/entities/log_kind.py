"""Configuration domain entities: versioned catalogue of log kinds."""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from ...core.constants import (
    CONFIG_ROOT_KEY,
    CONFIG_VERSION_KEY,
    CONFIG_LOGS_KEY,
    CONFIG_KIND_KEY,
    CONFIG_NAMING_KEY,
    CONFIG_REGEX_KEY,
)
from ...core.exceptions import ConfigLoadError


def _as_pattern_list(value: Any, key: str, config_path: Optional[str]) -> Tuple[str, ...]:
    """Normalizza una lista di pattern YAML (None -> vuota, scalari -> str)."""
    if value is None:
        return ()
    if isinstance(value, (str, int, float)):
        return (str(value),)
    if not isinstance(value, list):
        raise ConfigLoadError(f"'{key}' must be a list of regular expressions",
                              config_path=config_path, key=key)
    patterns = []
    for item in value:
        if isinstance(item, (dict, list)) or item is None:
            raise ConfigLoadError(f"'{key}' entries must be strings, got {item!r}",
                                  config_path=config_path, key=key)
        patterns.append(str(item))
    return tuple(patterns)


@dataclass(frozen=True)
class LogKind:
    """Domain entity representing one kind of log and its rules."""

    kind: str
    naming_patterns: Tuple[str, ...] = ()
    redaction_patterns: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any, config_path: Optional[str] = None) -> "LogKind":
        """Build a LogKind from a `logs` entry of the YAML document."""
        if not isinstance(data, dict):
            raise ConfigLoadError(f"log entries must be mappings, got {data!r}",
                                  config_path=config_path, section=CONFIG_LOGS_KEY)
        kind = data.get(CONFIG_KIND_KEY)
        return cls(
            kind="" if kind is None else str(kind),
            naming_patterns=_as_pattern_list(data.get(CONFIG_NAMING_KEY), CONFIG_NAMING_KEY, config_path),
            redaction_patterns=_as_pattern_list(data.get(CONFIG_REGEX_KEY), CONFIG_REGEX_KEY, config_path),
        )


@dataclass(frozen=True)
class VersionedConfig:
    """One top-level entry of the configuration, selected by `axcVersion`."""

    version: str
    log_kinds: Tuple[LogKind, ...] = ()

    @classmethod
    def from_dict(cls, data: Any, config_path: Optional[str] = None) -> "VersionedConfig":
        """Build a VersionedConfig from an `anonymizer` entry."""
        if not isinstance(data, dict):
            raise ConfigLoadError(f"'{CONFIG_ROOT_KEY}' entries must be mappings, got {data!r}",
                                  config_path=config_path, section=CONFIG_ROOT_KEY)
        if CONFIG_VERSION_KEY not in data or data[CONFIG_VERSION_KEY] is None:
            raise ConfigLoadError(f"'{CONFIG_ROOT_KEY}' entry without '{CONFIG_VERSION_KEY}'",
                                  config_path=config_path, section=CONFIG_ROOT_KEY, key=CONFIG_VERSION_KEY)

        logs = data.get(CONFIG_LOGS_KEY) or []
        if not isinstance(logs, list):
            raise ConfigLoadError(f"'{CONFIG_LOGS_KEY}' must be a list",
                                  config_path=config_path, section=str(data[CONFIG_VERSION_KEY]),
                                  key=CONFIG_LOGS_KEY)

        return cls(
            version=str(data[CONFIG_VERSION_KEY]),
            log_kinds=tuple(LogKind.from_dict(entry, config_path) for entry in logs),
        )

    @property
    def kinds(self) -> Tuple[str, ...]:
        """Kinds in declaration order."""
        return tuple(log_kind.kind for log_kind in self.log_kinds)


@dataclass(frozen=True)
class Configuration:
    """The whole configuration document: ordered VersionedConfig entries."""

    versions: Tuple[VersionedConfig, ...] = ()
    source: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Any, config_path: Optional[str] = None) -> "Configuration":
        """Build the configuration from the parsed YAML document."""
        if not isinstance(data, dict) or CONFIG_ROOT_KEY not in data:
            raise ConfigLoadError(f"missing top-level '{CONFIG_ROOT_KEY}' section",
                                  config_path=config_path, section=CONFIG_ROOT_KEY)
        entries = data[CONFIG_ROOT_KEY] or []
        if not isinstance(entries, list):
            raise ConfigLoadError(f"'{CONFIG_ROOT_KEY}' must be a list of versioned configs",
                                  config_path=config_path, section=CONFIG_ROOT_KEY)
        return cls(
            versions=tuple(VersionedConfig.from_dict(entry, config_path) for entry in entries),
            source=config_path,
        )

    @property
    def available_versions(self) -> Tuple[str, ...]:
        return tuple(entry.version for entry in self.versions)
