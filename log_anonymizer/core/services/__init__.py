"""
Core Services - Servizi condivisi dell'applicazione.
"""

from .logger_service import LoggerService, PACKAGE_LOGGER_NAME
from .base_service import BaseService

__all__ = [
    'LoggerService',
    'BaseService',
    'PACKAGE_LOGGER_NAME',
]
