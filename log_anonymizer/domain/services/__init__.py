"""Domain services."""

from .config_store import ConfigStore
from .identifier import LogIdentifier
from .redactor import Redactor, redact

__all__ = [
    'ConfigStore',
    'LogIdentifier',
    'Redactor',
    'redact',
]
