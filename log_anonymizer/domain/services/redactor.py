r"""
Redactor - Sostituzione dei gruppi catturati con il token di offuscamento

WHY: I pattern asseriscono il contesto (es. `user=(\w+)`) ma solo i gruppi
catturati vengono nascosti, così la struttura della riga resta leggibile.

Funzione pura: nessun I/O, nessun logging.
"""

import re
from typing import Iterable, List, Tuple

from ...core.constants import DEFAULT_OBFUSCATION
from ..entities.compiled_pattern import CompiledPattern


def _redact_match(match: re.Match, obfuscation: str) -> str:
    """
    Redige il testo di un singolo match.

    Per ogni gruppo (nell'ordine dei gruppi) sostituisce la prima occorrenza
    testuale del valore catturato all'interno del testo del match. Le parti
    già sostituite non vengono più cercate, quindi un gruppo successivo non
    può riscrivere un token inserito da un gruppo precedente.
    """
    # (testo, già_redatto)
    segments: List[Tuple[str, bool]] = [(match.group(0), False)]

    for value in match.groups():
        if not value:
            # gruppo non partecipante o vuoto: nessuna modifica
            continue
        for index, (text, redacted) in enumerate(segments):
            if redacted:
                continue
            position = text.find(value)
            if position < 0:
                continue
            replacement = []
            if position:
                replacement.append((text[:position], False))
            replacement.append((obfuscation, True))
            rest = text[position + len(value):]
            if rest:
                replacement.append((rest, False))
            segments[index:index + 1] = replacement
            break

    return "".join(text for text, _ in segments)


def redact(line: str, patterns: Iterable[CompiledPattern], obfuscation: str = DEFAULT_OBFUSCATION) -> str:
    """
    Applica in sequenza i pattern di redazione alla riga.

    Args:
        line: Riga di log (senza terminatore)
        patterns: Pattern compilati, nell'ordine in cui vanno applicati
        obfuscation: Token sostituito a ogni valore catturato

    Returns:
        Riga redatta; l'output di un pattern è l'input del successivo
    """
    for pattern in patterns:
        if not pattern.group_count:
            continue
        line = pattern.regex.sub(lambda m: _redact_match(m, obfuscation), line)
    return line


class Redactor:
    """Binds the patterns of one kind and the token, for the worker loop."""

    def __init__(self, patterns: Iterable[CompiledPattern], obfuscation: str = DEFAULT_OBFUSCATION) -> None:
        self.patterns = tuple(patterns)
        self.obfuscation = obfuscation

    def redact(self, line: str) -> str:
        return redact(line, self.patterns, self.obfuscation)
