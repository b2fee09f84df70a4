"""Log file domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.constants import ANONYMIZED_MARKER, OUTPUT_TIMESTAMP_FORMAT


def is_anonymized_path(path: str) -> bool:
    """True for files produced by a previous run."""
    return ANONYMIZED_MARKER in str(path)


@dataclass(frozen=True)
class LogFile:
    """An identified input file: absolute path and the kind it belongs to."""

    absolute_path: str
    kind: str

    def output_path(self, now: Optional[datetime] = None, attempt: int = 0) -> str:
        """
        Sibling output path: `<absolute_path>.anonymized.<YYYYMMDD-HHMMSS>`.

        Args:
            now: Local wall-clock time of the worker
            attempt: Collision counter, appended as `-<attempt>` when > 0
        """
        now = now or datetime.now()
        path = f"{self.absolute_path}{ANONYMIZED_MARKER}{now.strftime(OUTPUT_TIMESTAMP_FORMAT)}"
        if attempt:
            path = f"{path}-{attempt}"
        return path
