"""Configuration loader implementation."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..core.constants import DEFAULT_CONFIG_PATH, DEFAULT_ENCODING
from ..core.exceptions import ConfigLoadError
from ..domain.entities.log_kind import Configuration


class ConfigLoader:
    """YAML configuration loader for the anonymizer."""

    def __init__(self, default_config_path: Optional[Path] = None) -> None:
        """Initialize the config loader."""
        self._default_config_path = Path(default_config_path or DEFAULT_CONFIG_PATH)

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> Configuration:
        """
        Load the configuration document.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Parsed Configuration

        Raises:
            ConfigLoadError: missing/unreadable file, invalid YAML or invalid structure
        """
        path = Path(config_path) if config_path is not None else self._default_config_path
        raw = self._load_yaml_config(path)
        return Configuration.from_dict(raw, str(path))

    def _load_yaml_config(self, config_path: Path) -> Dict[str, Any]:
        """
        Carica il documento YAML grezzo.

        Args:
            config_path: Percorso del file YAML

        Returns:
            Dizionario di configurazione
        """
        if not config_path.is_file():
            raise ConfigLoadError(f"Configuration file not found: {config_path}", config_path=str(config_path))

        try:
            with open(config_path, 'r', encoding=DEFAULT_ENCODING) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid YAML in {config_path}: {e}", config_path=str(config_path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Cannot read {config_path}: {e}", config_path=str(config_path)) from e

        if config is None:
            raise ConfigLoadError(f"Configuration file is empty: {config_path}", config_path=str(config_path))
        return config
