"""Anonymized output writer implementation."""

from datetime import datetime
from typing import Callable, Optional, TextIO

from ..core.constants import DEFAULT_ENCODING, ENCODING_ERRORS
from ..domain.entities.log_file import LogFile

# Tentativi massimi in caso di collisione del timestamp
MAX_COLLISION_ATTEMPTS = 1000


class AnonymizedLogWriter:
    """
    Creates the `.anonymized.<timestamp>` sibling of a log file and writes lines.

    The file is created exclusively: when the timestamped name is already
    taken a `-<n>` counter is appended instead of overwriting.
    """

    def __init__(self, log_file: LogFile, encoding: str = DEFAULT_ENCODING,
                 clock: Callable[[], datetime] = datetime.now) -> None:
        self.log_file = log_file
        self.encoding = encoding
        self.clock = clock
        self.output_path: Optional[str] = None
        self._handle: Optional[TextIO] = None

    def open(self) -> "AnonymizedLogWriter":
        now = self.clock()
        for attempt in range(MAX_COLLISION_ATTEMPTS):
            candidate = self.log_file.output_path(now, attempt)
            try:
                self._handle = open(candidate, 'x', encoding=self.encoding,
                                    errors=ENCODING_ERRORS, newline='\n')
            except FileExistsError:
                continue
            self.output_path = candidate
            return self
        raise FileExistsError(f"no free output name for {self.log_file.absolute_path}")

    def write_line(self, line: str) -> None:
        self._handle.write(line)
        self._handle.write('\n')

    def close(self) -> None:
        if self._handle is not None:
            handle, self._handle = self._handle, None
            handle.close()

    def __enter__(self) -> "AnonymizedLogWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

