"""Domain entities."""

from .log_kind import LogKind, VersionedConfig, Configuration
from .compiled_pattern import CompiledPattern
from .log_file import LogFile, is_anonymized_path
from .processing_report import FileOutcome, ProcessingReport, CleanupReport

__all__ = [
    'LogKind',
    'VersionedConfig',
    'Configuration',
    'CompiledPattern',
    'LogFile',
    'is_anonymized_path',
    'FileOutcome',
    'ProcessingReport',
    'CleanupReport',
]
