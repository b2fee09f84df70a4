"""Log identification by basename."""

import os
from typing import Optional

from ...core.constants import WILDCARD_KIND
from ...core.exceptions import NoPatternsFoundError, UnidentifiedLogError
from .config_store import ConfigStore


class LogIdentifier:
    """Maps a file path to a log kind using the naming patterns of the store."""

    def __init__(self, config_store: ConfigStore) -> None:
        self._config_store = config_store

    def identify(self, path: str, kind_filter: str = WILDCARD_KIND) -> str:
        """
        Return the kind of `path`.

        A forced kind is returned as-is without looking at the file.
        Otherwise the first naming pattern, in declaration order, that
        matches the basename decides.

        Raises:
            UnidentifiedLogError: no naming pattern matches the basename
        """
        if kind_filter != WILDCARD_KIND:
            return kind_filter

        basename = os.path.basename(str(path).rstrip(os.sep)) or str(path)
        kind = self._first_match(basename)
        if kind is None:
            raise UnidentifiedLogError(basename)
        return kind

    def _first_match(self, basename: str) -> Optional[str]:
        try:
            patterns = self._config_store.naming_patterns(WILDCARD_KIND)
        except NoPatternsFoundError:
            return None
        for pattern in patterns:
            if pattern.matches(basename):
                return pattern.kind
        return None
