"""Fixture condivise dei test."""

import copy
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest
import yaml

from log_anonymizer.core.services.logger_service import LoggerService
from log_anonymizer.domain.entities.log_kind import Configuration
from log_anonymizer.domain.services.config_store import ConfigStore

FIXED_NOW = datetime(2026, 10, 19, 12, 30, 5)
FIXED_TS = "20261019-123005"


ENGINE_CONFIG = {
    "anonymizer": [
        {
            "axcVersion": "default",
            "logs": [
                {
                    "kind": "engine",
                    "namingPatterns": [r"^engine-\d+\.log$"],
                    "regexPatterns": [r"user=(\w+)"],
                },
            ],
        },
    ],
}

MULTI_CONFIG = {
    "anonymizer": [
        {
            "axcVersion": "default",
            "logs": [
                {
                    "kind": "engine",
                    "namingPatterns": [r"^engine-\d+\.log$", r"^engine\.log$"],
                    "regexPatterns": [r"user=(\w+)", r"host=(\w+):(\d+)"],
                },
                {
                    "kind": "access",
                    "namingPatterns": [r"^access.*\.log$", r"\.log$"],
                    "regexPatterns": [r"ip=(\d+\.\d+\.\d+\.\d+)"],
                },
                {
                    "kind": "empty",
                },
            ],
        },
        {
            "axcVersion": "2.0",
            "logs": [
                {
                    "kind": "engine",
                    "namingPatterns": [r"^engine.*$"],
                    "regexPatterns": [r"user=(\w+)@(\w+)"],
                },
            ],
        },
    ],
}


@pytest.fixture(autouse=True)
def reset_logging():
    """Ogni test parte senza gli handler installati da LoggerService."""
    yield
    LoggerService.reset()


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Scrive un dizionario come YAML e ne restituisce il percorso."""

    def _write(data, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def multi_config() -> dict:
    return copy.deepcopy(MULTI_CONFIG)


@pytest.fixture
def engine_store() -> ConfigStore:
    configuration = Configuration.from_dict(ENGINE_CONFIG)
    return ConfigStore(ConfigStore.select(configuration, "default"))


@pytest.fixture
def multi_store() -> ConfigStore:
    configuration = Configuration.from_dict(MULTI_CONFIG)
    return ConfigStore(ConfigStore.select(configuration, "default"))


@pytest.fixture
def log_root(tmp_path: Path) -> Path:
    root = tmp_path / "logs"
    root.mkdir()
    return root
