"""
Log Anonymizer - Redazione dei file di log guidata da configurazione

Scansiona un percorso, riconosce i file di log dal nome e scrive per
ciascuno un file `.anonymized.<timestamp>` in cui i gruppi catturati dai
pattern configurati sono sostituiti da un token di offuscamento.

Version: 0.1.0
"""

from .core.constants import APP_VERSION

__version__ = APP_VERSION
