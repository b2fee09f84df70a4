"""
Core Constants - Costanti centralizzate per il log anonymizer

Valori di default della CLI, marcatori dei file prodotti e limiti
di sistema per la lettura dei log.

Version: 1.0.0
"""

from pathlib import Path

# =============================================================================
# CONFIGURAZIONE
# =============================================================================

# Percorso di default del file di configurazione
DEFAULT_CONFIG_PATH = Path("config.yaml")

# Versione di configurazione attivata se non specificata
DEFAULT_AXC_VERSION = "default"

# Kind jolly: tutti i tipi di log
DEFAULT_KIND = "*"
WILDCARD_KIND = DEFAULT_KIND

# Testo sostituito ai gruppi catturati
DEFAULT_OBFUSCATION = "[*CONFIDENTIAL*]"

# Numero di worker paralleli
DEFAULT_WORKER_COUNT = 2

# Chiavi del documento YAML
CONFIG_ROOT_KEY = "anonymizer"
CONFIG_VERSION_KEY = "axcVersion"
CONFIG_LOGS_KEY = "logs"
CONFIG_KIND_KEY = "kind"
CONFIG_NAMING_KEY = "namingPatterns"
CONFIG_REGEX_KEY = "regexPatterns"

# =============================================================================
# OUTPUT
# =============================================================================

# Unico marcatore dei file prodotti (esclusione e cleanup)
ANONYMIZED_MARKER = ".anonymized."

# Timestamp del file di output (ora locale)
OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

# =============================================================================
# LETTURA FILE
# =============================================================================

# Encoding di fallback
DEFAULT_ENCODING = 'utf-8'

# Gestione byte non decodificabili: vengono riscritti identici
ENCODING_ERRORS = 'surrogateescape'

# Byte campionati per il rilevamento encoding (64KB)
BUFFER_SIZE = 64 * 1024

# Dimensione massima riga singola (1MB), oltre il file viene abortito
MAX_LINE_LENGTH = 1024 * 1024

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

DEFAULT_LOG_LEVEL = 'WARNING'

LOG_TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# Rotazione file di log (10MB, 5 backup)
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# =============================================================================
# CLI
# =============================================================================

APP_NAME = "log-anonymizer"
APP_VERSION = "0.1.0"

# Colonne dei listing (indice, kind)
LIST_INDEX_WIDTH = 4
LIST_KIND_WIDTH = 16
