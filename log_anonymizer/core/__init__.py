"""
Core Layer - Layer condiviso per tutta l'applicazione

Eccezioni, costanti, enumerazioni e servizi di logging condivisi
da domain, infrastructure e application.

DESIGN:
- Layer condiviso per massimizzare la riusabilità
- Dipendenze minime per evitare coupling
- Gestione centralizzata di errori e logging

Version: 1.0.0
"""

from .exceptions import (
    CoreException,
    ValidationError,
    ConfigurationError,
    ConfigLoadError,
    VersionNotFoundError,
    PatternCompileError,
    NoPatternsFoundError,
    UnidentifiedLogError,
    ProcessingError,
    DiscoveryError,
    DeletionError,
)

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_AXC_VERSION,
    DEFAULT_KIND,
    WILDCARD_KIND,
    DEFAULT_OBFUSCATION,
    DEFAULT_WORKER_COUNT,
    ANONYMIZED_MARKER,
    OUTPUT_TIMESTAMP_FORMAT,
    DEFAULT_ENCODING,
    BUFFER_SIZE,
    MAX_LINE_LENGTH,
)

from .enums import FileState, PatternType

from .services import LoggerService, BaseService

__all__ = [
    # Eccezioni
    'CoreException',
    'ValidationError',
    'ConfigurationError',
    'ConfigLoadError',
    'VersionNotFoundError',
    'PatternCompileError',
    'NoPatternsFoundError',
    'UnidentifiedLogError',
    'ProcessingError',
    'DiscoveryError',
    'DeletionError',

    # Costanti
    'DEFAULT_CONFIG_PATH',
    'DEFAULT_AXC_VERSION',
    'DEFAULT_KIND',
    'WILDCARD_KIND',
    'DEFAULT_OBFUSCATION',
    'DEFAULT_WORKER_COUNT',
    'ANONYMIZED_MARKER',
    'OUTPUT_TIMESTAMP_FORMAT',
    'DEFAULT_ENCODING',
    'BUFFER_SIZE',
    'MAX_LINE_LENGTH',

    # Enumerazioni
    'FileState',
    'PatternType',

    # Servizi
    'LoggerService',
    'BaseService',
]
