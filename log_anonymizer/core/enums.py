"""
Core Enums - Enumerazioni del log anonymizer

Version: 1.0.0
"""

from enum import Enum


class FileState(Enum):
    """
    Stati di un file durante il processing.

    WHY: Tracciare lo stato di ogni file permette di riportare
    all'utente cosa è stato prodotto e cosa è fallito.

    pending -> opened -> streaming -> closed (successo)
    pending -> aborted (fallimento)
    pending -> skipped (nessun pattern di redazione)
    """

    PENDING = "pending"
    OPENED = "opened"
    STREAMING = "streaming"
    CLOSED = "closed"
    ABORTED = "aborted"
    SKIPPED = "skipped"

    def is_success(self) -> bool:
        """True se il file è stato anonimizzato completamente."""
        return self == FileState.CLOSED


class PatternType(Enum):
    """Famiglie di pattern di un kind."""

    NAMING = "naming"          # Riconoscimento del file dal nome
    REDACTION = "redaction"    # Redazione del contenuto

    @property
    def label(self) -> str:
        """Etichetta usata nei messaggi di errore."""
        return "naming patterns" if self == PatternType.NAMING else "regexes"
