"""Compiled pattern domain entity."""

import re
from dataclasses import dataclass

from ...core.enums import PatternType


@dataclass(frozen=True)
class CompiledPattern:
    """A configuration regex compiled at activation, tagged with its kind."""

    kind: str
    source: str
    regex: re.Pattern
    pattern_type: PatternType = PatternType.REDACTION

    @property
    def group_count(self) -> int:
        """Number of capturing groups; zero means the pattern never redacts."""
        return self.regex.groups

    def matches(self, text: str) -> bool:
        """Unanchored test, as used for basenames."""
        return self.regex.search(text) is not None
