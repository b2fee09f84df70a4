"""
Core Exceptions - Eccezioni centralizzate per il log anonymizer

Questo modulo definisce tutte le eccezioni personalizzate utilizzate
dall'anonymizer, con una gerarchia chiara e contesto per il debugging.

DESIGN:
- Gerarchia di eccezioni ben definita
- Informazioni contestuali per debugging
- Separazione tra errori fatali all'avvio ed errori per singolo file

Version: 1.0.0
"""

from typing import Optional, Dict, Any, Sequence


class CoreException(Exception):
    """
    Eccezione base per tutte le eccezioni dell'applicazione.

    Attributes:
        message: Messaggio descrittivo dell'errore
        context: Dizionario con informazioni contestuali
        severity: Gravità dell'errore
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None, severity: str = "error"):
        self.message = message
        self.context = context or {}
        self.severity = severity
        super().__init__(self.message)

    def __str__(self) -> str:
        """Rappresentazione stringa dell'eccezione con contesto."""
        context = {k: v for k, v in self.context.items() if v is not None}
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class ValidationError(CoreException):
    """
    Eccezione per parametri non validi (es. numero di worker).

    Attributes:
        field: Campo che ha causato l'errore di validazione
        value: Valore che ha causato l'errore
        rule: Regola di validazione violata
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, rule: Optional[str] = None):
        context = {
            'field': field,
            'value': value,
            'rule': rule
        }
        super().__init__(message, context, "validation_error")


class ConfigurationError(CoreException):
    """
    Eccezione per errori di configurazione.

    WHY: Errori di configurazione sono fatali all'avvio, nessun file
    viene toccato se la configurazione non è utilizzabile.

    Attributes:
        config_path: Percorso del file di configurazione
        section: Sezione della configurazione problematica
        key: Chiave di configurazione problematica
    """

    def __init__(self, message: str, config_path: Optional[str] = None, section: Optional[str] = None,
                 key: Optional[str] = None):
        context = {
            'config_path': config_path,
            'section': section,
            'key': key
        }
        super().__init__(message, context, "critical")


class ConfigLoadError(ConfigurationError):
    """Il documento di configurazione non può essere letto o ha una struttura non valida."""


class VersionNotFoundError(ConfigurationError):
    """Nessuna voce `axcVersion` corrisponde alla versione richiesta."""

    def __init__(self, version: str, config_path: Optional[str] = None, available: Sequence[str] = ()):
        self.version = version
        self.available = tuple(available)
        super().__init__(f"no config found for version {version}", config_path=config_path,
                         section="anonymizer", key="axcVersion")
        if self.available:
            self.context['available'] = ", ".join(self.available)


class PatternCompileError(ConfigurationError):
    """
    Un pattern regex della configurazione non compila.

    Non interrompe l'avvio: il pattern viene escluso e segnalato.
    """

    def __init__(self, kind: str, pattern: str, reason: str):
        self.kind = kind
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern for kind {kind}: {pattern} ({reason})", section=kind, key=pattern)


class NoPatternsFoundError(CoreException):
    """
    Nessun pattern (o nessun kind) trovato per il filtro richiesto.

    Attributes:
        kind: Filtro kind richiesto
        version: Versione attiva della configurazione
    """

    def __init__(self, message: str, kind: Optional[str] = None, version: Optional[str] = None):
        self.kind = kind
        self.version = version
        super().__init__(message, {'kind': kind, 'version': version}, "error")


class UnidentifiedLogError(CoreException):
    """Il nome del file non corrisponde a nessun naming pattern."""

    def __init__(self, basename: str):
        self.basename = basename
        super().__init__(f"not able to detect log type: {basename}", severity="error")


class ProcessingError(CoreException):
    """
    Eccezione per errori durante il processing di un file.

    WHY: Il recovery è per singolo file, lo scheduler logga
    l'errore e passa al file successivo.

    Attributes:
        stage: Stadio del processing dove è avvenuto l'errore
        path: File coinvolto
    """

    def __init__(self, message: str, stage: Optional[str] = None, path: Optional[str] = None):
        self.stage = stage
        self.path = path
        super().__init__(message, {'stage': stage, 'path': path}, "processing_error")


class DiscoveryError(ProcessingError):
    """Errore di lettura di una directory durante la scansione: interrompe l'esecuzione."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, stage="discovery", path=path)


class DeletionError(ProcessingError):
    """Un file anonimizzato non può essere cancellato durante il cleanup."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, stage="cleanup", path=path)
