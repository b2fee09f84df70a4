"""Tabular listings of the active configuration."""

from typing import List

from ...core.constants import LIST_INDEX_WIDTH, LIST_KIND_WIDTH, WILDCARD_KIND
from ...domain.entities.compiled_pattern import CompiledPattern
from ...domain.services.config_store import ConfigStore


class ListingService:
    """Formats kinds and patterns as `index, kind[, pattern]` rows."""

    def __init__(self, config_store: ConfigStore) -> None:
        self._config_store = config_store

    def naming_patterns(self, kind_filter: str = WILDCARD_KIND) -> List[str]:
        return self._pattern_rows(self._config_store.naming_patterns(kind_filter))

    def regex_patterns(self, kind_filter: str = WILDCARD_KIND) -> List[str]:
        return self._pattern_rows(self._config_store.redaction_patterns(kind_filter))

    def kinds(self) -> List[str]:
        return [f"{index:<{LIST_INDEX_WIDTH}d}{kind}"
                for index, kind in enumerate(self._config_store.kinds(), start=1)]

    @staticmethod
    def _pattern_rows(patterns: List[CompiledPattern]) -> List[str]:
        return [f"{index:<{LIST_INDEX_WIDTH}d}{pattern.kind:<{LIST_KIND_WIDTH}s}{pattern.source}"
                for index, pattern in enumerate(patterns, start=1)]
