"""Line-oriented log reader implementation."""

from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

import chardet

from ..core.constants import BUFFER_SIZE, DEFAULT_ENCODING, ENCODING_ERRORS, MAX_LINE_LENGTH
from ..core.exceptions import ProcessingError


def detect_encoding(file_path: Union[str, Path], sample_size: int = BUFFER_SIZE) -> str:
    """
    Rileva l'encoding del file sui primi `sample_size` byte.

    Args:
        file_path: File da analizzare
        sample_size: Byte campionati

    Returns:
        Encoding rilevato, DEFAULT_ENCODING se incerto
    """
    with open(file_path, 'rb') as f:
        raw_data = f.read(sample_size)
    if not raw_data:
        return DEFAULT_ENCODING
    detected = chardet.detect(raw_data)
    encoding = detected.get('encoding') or DEFAULT_ENCODING
    # ascii è un sottoinsieme di utf-8: più tollerante per il resto del file
    if encoding.lower() == 'ascii':
        return DEFAULT_ENCODING
    return encoding


class LogReader:
    """
    Reads a log file line by line, without line terminators.

    The handle is opened by `__enter__` and always released by `__exit__`.
    """

    def __init__(self, file_path: Union[str, Path], encoding: Optional[str] = None,
                 max_line_length: Optional[int] = None) -> None:
        """
        Initialize the reader.

        Args:
            file_path: Source log file
            encoding: Forced encoding, detected with chardet when None
            max_line_length: Longest accepted line (default MAX_LINE_LENGTH), longer lines abort the read
        """
        self.file_path = Path(file_path)
        self.encoding = encoding
        self.max_line_length = max_line_length if max_line_length is not None else MAX_LINE_LENGTH
        self._handle: Optional[TextIO] = None

    def open(self) -> "LogReader":
        if self.encoding is None:
            self.encoding = detect_encoding(self.file_path)
        # solo `\n` termina una riga: un `\r` isolato fa parte del contenuto
        self._handle = open(self.file_path, 'r', encoding=self.encoding, errors=ENCODING_ERRORS, newline='\n')
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "LogReader":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        return self.read_lines()

    def read_lines(self) -> Iterator[str]:
        r"""
        Yield the lines of the file.

        Lines are split on `\n` only; one trailing `\r` is dropped, so CRLF
        input yields the same lines as LF input.

        Raises:
            ProcessingError: a line is longer than `max_line_length`
        """
        if self._handle is None:
            raise ProcessingError("reader is not open", stage="read", path=str(self.file_path))

        line_number = 0
        while True:
            # +2: spazio per il terminatore `\r\n`
            line = self._handle.readline(self.max_line_length + 2)
            if not line:
                return
            line_number += 1
            if line.endswith('\n'):
                line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
            if len(line) > self.max_line_length:
                raise ProcessingError(
                    f"line {line_number} exceeds {self.max_line_length} characters",
                    stage="read", path=str(self.file_path),
                )
            yield line
