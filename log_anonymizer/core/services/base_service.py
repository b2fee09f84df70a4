"""
Classe base per tutti i servizi.

WHY: Fornisce un logger nominato per classe a tutti i servizi,
sotto la gerarchia del logger di package configurato da LoggerService.
"""

import json
import logging
from typing import Any, Dict, Optional

from .logger_service import PACKAGE_LOGGER_NAME


class BaseService:
    """
    Classe base per tutti i servizi.

    Contract:
        - Input: Logger opzionale
        - Output: Servizio con `self.logger` pronto all'uso
        - Side effects: Nessuno, gli handler sono gestiti da LoggerService
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Inizializza il servizio base.

        Args:
            logger: Logger opzionale, se non fornito ne usa uno per classe
        """
        if logger is None:
            self.logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{self.__class__.__name__}")
        else:
            self.logger = logger

    def log_performance(self, operation: str, duration: float, context: Optional[Dict[str, Any]] = None):
        """
        Logga (INFO) la durata di un'operazione.

        Args:
            operation: Nome dell'operazione
            duration: Durata in secondi
            context: Metriche aggiuntive
        """
        full_context = dict(context or {})
        full_context['duration_ms'] = round(duration * 1000, 3)
        self.logger.info(f"Performance: {operation} completed in {duration:.3f}s | "
                         f"Context: {json.dumps(full_context, default=str)}")
