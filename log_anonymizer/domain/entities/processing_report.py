"""Processing report entities collected by the scheduler."""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...core.enums import FileState
from .log_file import LogFile


@dataclass
class FileOutcome:
    """Final state of one file of a run."""

    log_file: LogFile
    state: FileState = FileState.PENDING
    output_path: Optional[str] = None
    lines: int = 0
    error: Optional[str] = None
    # stato raggiunto prima dell'abort (pending, opened o streaming)
    aborted_in: Optional[FileState] = None


class ProcessingReport:
    """
    Thread-safe accumulator of FileOutcome values.

    WHY: I worker registrano i risultati in parallelo, il lock è l'unico
    stato condiviso oltre alla coda di lavoro.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._outcomes: List[FileOutcome] = []

    def add(self, outcome: FileOutcome) -> None:
        with self._lock:
            self._outcomes.append(outcome)

    @property
    def outcomes(self) -> List[FileOutcome]:
        with self._lock:
            return list(self._outcomes)

    def _by_state(self, state: FileState) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.state == state]

    @property
    def processed(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.state.is_success()]

    @property
    def aborted(self) -> List[FileOutcome]:
        return self._by_state(FileState.ABORTED)

    @property
    def skipped(self) -> List[FileOutcome]:
        return self._by_state(FileState.SKIPPED)

    @property
    def total_lines(self) -> int:
        return sum(outcome.lines for outcome in self.outcomes)

    def get_statistics(self) -> Dict[str, Any]:
        """Statistics dictionary for logging."""
        return {
            "total_files": len(self.outcomes),
            "processed": len(self.processed),
            "aborted": len(self.aborted),
            "skipped": len(self.skipped),
            "total_lines": self.total_lines,
        }


@dataclass
class CleanupReport:
    """Result of a cleanup: deleted outputs and deletions that failed."""

    deleted: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def get_statistics(self) -> Dict[str, Any]:
        return {"deleted": len(self.deleted), "failed": len(self.failed)}
