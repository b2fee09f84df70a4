"""
Config Store - Catalogo attivo di kind, naming pattern e pattern di redazione

WHY: La configurazione viene caricata una sola volta all'avvio e resta
immutabile; lo store viene passato esplicitamente a chi ne ha bisogno
invece di vivere in una variabile globale.
"""

import re
from pathlib import Path
from typing import List, Tuple, Union

from ...core.constants import WILDCARD_KIND
from ...core.enums import PatternType
from ...core.exceptions import (
    ConfigLoadError,
    NoPatternsFoundError,
    PatternCompileError,
    VersionNotFoundError,
)
from ...core.services.base_service import BaseService
from ..entities.compiled_pattern import CompiledPattern
from ..entities.log_kind import Configuration, VersionedConfig


class ConfigStore(BaseService):
    """
    Configurazione attiva (una VersionedConfig) con i pattern già compilati.

    Contract:
        - Input: VersionedConfig selezionata
        - Output: Pattern compilati in ordine di dichiarazione, filtrabili per kind
        - Side effects: Un warning all'attivazione per i pattern non compilabili
    """

    def __init__(self, versioned_config: VersionedConfig):
        """
        Attiva una VersionedConfig compilando tutti i pattern.

        Args:
            versioned_config: Voce della configurazione da attivare

        Raises:
            ConfigLoadError: kind vuoti o duplicati
        """
        super().__init__()
        self._config = versioned_config
        self._validate_kinds()

        self.compile_errors: List[PatternCompileError] = []
        self._naming = self._compile(PatternType.NAMING)
        self._redaction = self._compile(PatternType.REDACTION)

        if self.compile_errors:
            details = "; ".join(f"[{e.kind}] {e.pattern}: {e.reason}" for e in self.compile_errors)
            self.logger.warning(f"⚠️ {len(self.compile_errors)} pattern non compilabili esclusi: {details}")

    # ------------------------------------------------------------------
    # Costruzione
    # ------------------------------------------------------------------

    @staticmethod
    def load(path: Union[str, Path]) -> Configuration:
        """Legge e interpreta il documento di configurazione."""
        from ...infrastructure.config_loader import ConfigLoader

        return ConfigLoader().load_config(path)

    @staticmethod
    def select(configuration: Configuration, version: str) -> VersionedConfig:
        """
        Prima voce con `axcVersion == version`.

        Raises:
            VersionNotFoundError: nessuna voce corrisponde
        """
        for entry in configuration.versions:
            if entry.version == version:
                return entry
        raise VersionNotFoundError(version, config_path=configuration.source,
                                   available=configuration.available_versions)

    @classmethod
    def from_file(cls, path: Union[str, Path], version: str) -> "ConfigStore":
        """Load + select + activate."""
        return cls(cls.select(cls.load(path), version))

    def _validate_kinds(self):
        seen = set()
        for log_kind in self._config.log_kinds:
            if not log_kind.kind:
                raise ConfigLoadError(f"empty kind in version {self.version}",
                                      section=self.version, key="kind")
            if log_kind.kind in seen:
                raise ConfigLoadError(f"duplicate kind '{log_kind.kind}' in version {self.version}",
                                      section=self.version, key="kind")
            seen.add(log_kind.kind)

    def _compile(self, pattern_type: PatternType) -> Tuple[CompiledPattern, ...]:
        compiled = []
        for log_kind in self._config.log_kinds:
            sources = log_kind.naming_patterns if pattern_type == PatternType.NAMING else log_kind.redaction_patterns
            for source in sources:
                try:
                    regex = re.compile(source)
                except re.error as e:
                    self.compile_errors.append(PatternCompileError(log_kind.kind, source, str(e)))
                    continue
                compiled.append(CompiledPattern(kind=log_kind.kind, source=source, regex=regex,
                                                pattern_type=pattern_type))
        return tuple(compiled)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    @property
    def version(self) -> str:
        return self._config.version

    @property
    def versioned_config(self) -> VersionedConfig:
        return self._config

    def naming_patterns(self, kind_filter: str = WILDCARD_KIND) -> List[CompiledPattern]:
        """Naming pattern del kind richiesto, o tutti con `*`."""
        return self._filter(self._naming, kind_filter, PatternType.NAMING)

    def redaction_patterns(self, kind_filter: str = WILDCARD_KIND) -> List[CompiledPattern]:
        """Pattern di redazione del kind richiesto, o tutti con `*`."""
        return self._filter(self._redaction, kind_filter, PatternType.REDACTION)

    def _filter(self, patterns: Tuple[CompiledPattern, ...], kind_filter: str,
                pattern_type: PatternType) -> List[CompiledPattern]:
        selected = [p for p in patterns if kind_filter == WILDCARD_KIND or p.kind == kind_filter]
        if not selected:
            raise NoPatternsFoundError(
                f"no {pattern_type.label} found for kind {kind_filter} under {self.version}",
                kind=kind_filter, version=self.version,
            )
        return selected

    def kinds(self) -> List[str]:
        """Kind in ordine di dichiarazione."""
        kinds = list(self._config.kinds)
        if not kinds:
            raise NoPatternsFoundError(f"no log types found for {self.version}", version=self.version)
        return kinds
