"""
File Walker - Scoperta dei file di log da anonimizzare

WHY: La scansione è separata dal processing così lo scheduler riceve
una lista già filtrata e identificata di LogFile.
"""

import os
from typing import Iterator, List, Optional

from ..core.constants import WILDCARD_KIND
from ..core.exceptions import DiscoveryError, UnidentifiedLogError
from ..core.services.base_service import BaseService
from ..domain.entities.log_file import LogFile, is_anonymized_path
from ..domain.services.identifier import LogIdentifier


class FileWalker(BaseService):
    """
    Scansione ricorsiva di un percorso.

    Contract:
        - Input: Radice (directory o singolo file) e filtro kind
        - Output: LogFile in ordine lessicale di scansione
        - Side effects: Errori per file loggati, errori di directory propagati
    """

    def __init__(self, identifier: Optional[LogIdentifier] = None):
        """
        Args:
            identifier: Necessario solo per `discover`
        """
        super().__init__()
        self._identifier = identifier

    def discover(self, root: str, kind_filter: str = WILDCARD_KIND) -> List[LogFile]:
        """
        Elenca i file da anonimizzare sotto `root`.

        I file già anonimizzati vengono esclusi, quelli non riconosciuti
        vengono loggati e saltati.

        Raises:
            DiscoveryError: errore di lettura di una directory
        """
        if self._identifier is None:
            raise ValueError("discover requires a LogIdentifier")

        log_files = []
        for path in self._walk(root):
            if is_anonymized_path(path):
                continue

            try:
                kind = self._identifier.identify(path, kind_filter)
            except UnidentifiedLogError as e:
                self.logger.error(str(e))
                continue

            try:
                absolute_path = os.path.abspath(path)
            except OSError as e:
                self.logger.error(f"cannot resolve {path}: {e}")
                continue

            self.logger.debug(f"found [{kind}] log file: {absolute_path}")
            log_files.append(LogFile(absolute_path=absolute_path, kind=kind))

        return log_files

    def discover_anonymized(self, root: str) -> List[str]:
        """
        Elenca (percorsi assoluti) i file prodotti da esecuzioni precedenti.

        Raises:
            DiscoveryError: errore di lettura di una directory
        """
        return [os.path.abspath(path) for path in self._walk(root) if is_anonymized_path(path)]

    def _walk(self, root: str) -> Iterator[str]:
        """Regular files under `root`, directories visited in lexical order."""
        root = str(root)
        if os.path.isfile(root):
            yield root
            return

        def on_error(error: OSError):
            raise DiscoveryError(f"cannot read {error.filename or root}: {error.strerror or error}",
                                 path=error.filename or root) from error

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                if os.path.isfile(path):
                    yield path
