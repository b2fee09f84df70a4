"""Infrastructure layer: YAML loading, filesystem walk, file reading and writing."""

from .config_loader import ConfigLoader
from .file_walker import FileWalker
from .log_reader import LogReader, detect_encoding
from .log_writer import AnonymizedLogWriter

__all__ = [
    'ConfigLoader',
    'FileWalker',
    'LogReader',
    'detect_encoding',
    'AnonymizedLogWriter',
]
