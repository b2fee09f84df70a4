"""
Logger Service - Servizio di logging centralizzato

Configura una sola volta il logging dell'applicazione: diagnostica su
stderr, livello dinamico (--debug), rotazione opzionale su file.

DESIGN:
- Un solo punto di configurazione degli handler
- Logging strutturato opzionale
- Rotazione automatica dei file di log
- Gli stream dell'output (stdout) restano riservati ai listing

Version: 1.0.0
"""

import logging
import logging.handlers
import json
import sys
from pathlib import Path
from typing import Dict, Any, Optional, TextIO

from ..constants import (
    LOG_LEVELS,
    DEFAULT_LOG_LEVEL,
    LOG_TIMESTAMP_FORMAT,
    MAX_LOG_FILE_SIZE,
    LOG_BACKUP_COUNT,
)

PACKAGE_LOGGER_NAME = "log_anonymizer"


class LoggerService:
    """
    Servizio di logging centralizzato per l'applicazione.

    WHY: Servizio centralizzato per garantire consistenza nel logging,
    i servizi usano solo `logging.getLogger` tramite BaseService.

    Contract:
        - Configurazione centralizzata del logger di package
        - Logging strutturato con metadati
        - Rotazione automatica dei file
        - Il logger di package appartiene al servizio: ogni istanza ne sostituisce gli handler
    """

    def __init__(self,
                 log_level: str = DEFAULT_LOG_LEVEL,
                 log_file: Optional[Path] = None,
                 console_output: bool = True,
                 structured_logging: bool = False,
                 stream: Optional[TextIO] = None):
        """
        Inizializza il servizio di logging.

        Args:
            log_level: Livello di logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Percorso del file di log (opzionale)
            console_output: Se True, logga anche su stderr
            structured_logging: Se True, usa logging strutturato JSON
            stream: Stream della console (default sys.stderr)
        """
        self.log_level = self._validate_log_level(log_level)
        self.log_file = Path(log_file) if log_file else None
        self.console_output = console_output
        self.structured_logging = structured_logging
        self.stream = stream if stream is not None else sys.stderr

        self.logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        self._setup_logging()
        self.logger.setLevel(self.log_level)

    def _validate_log_level(self, level: str) -> str:
        """
        Valida il livello di logging.

        Args:
            level: Livello di logging da validare

        Returns:
            Livello di logging validato
        """
        if level.upper() in LOG_LEVELS:
            return level.upper()
        print(f"Warning: Livello di log '{level}' non valido, usando {DEFAULT_LOG_LEVEL}", file=sys.stderr)
        return DEFAULT_LOG_LEVEL

    def _setup_logging(self):
        """Configura gli handler del logger di package."""
        LoggerService.reset()

        if self.structured_logging:
            formatter = logging.Formatter(
                '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
                '"module": "%(name)s", "message": "%(message)s"}'
            )
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt=LOG_TIMESTAMP_FORMAT
            )

        if self.console_output:
            console_handler = logging.StreamHandler(self.stream)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.log_file:
            self._setup_file_handler(formatter)

    def _setup_file_handler(self, formatter: logging.Formatter):
        """Configura l'handler per file con rotazione."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            self.log_file,
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

    @staticmethod
    def reset():
        """Rimuove e chiude gli handler del logger di package."""
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def log(self, level: str, message: str, context: Optional[Dict[str, Any]] = None, **kwargs):
        """
        Logga un messaggio con contesto opzionale.

        Args:
            level: Livello di logging
            message: Messaggio da loggare
            context: Contesto aggiuntivo (opzionale)
            **kwargs: Parametri aggiuntivi per il contesto
        """
        full_context = dict(context or {})
        full_context.update(kwargs)

        if full_context:
            log_message = f"{message} | Context: {json.dumps(full_context, default=str)}"
        else:
            log_message = message

        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO
        self.logger.log(numeric_level, log_message)

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs):
        """Logga un messaggio di debug."""
        self.log("DEBUG", message, context, **kwargs)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs):
        """Logga un errore."""
        self.log("ERROR", message, context, **kwargs)

    def log_exception(self, exception: Exception, context: Optional[Dict[str, Any]] = None, **kwargs):
        """
        Logga un'eccezione, con stack trace solo in modalità debug.

        Args:
            exception: Eccezione da loggare
            context: Contesto aggiuntivo
            **kwargs: Parametri aggiuntivi
        """
        full_context = dict(context or {})
        full_context.update(kwargs)
        full_context['exception_type'] = type(exception).__name__

        self.error(str(exception), full_context)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Stack trace:", exc_info=exception)
