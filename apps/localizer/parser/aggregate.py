from __future__ import annotations

from typing import Iterable, List, Set

from .models import DefinedKeySet, LocalizationEntry, ParseResult


def merge(results: Iterable[ParseResult]) -> ParseResult:
    """Combine per-file results in the given order.

    Keys are unioned; entry lists are concatenated as-is, so every
    occurrence from every file survives.
    """
    keys: Set[str] = set()
    entries: List[LocalizationEntry] = []
    concatenated: List[LocalizationEntry] = []
    for result in results:
        keys.update(result.unique_keys)
        entries.extend(result.all_entries)
        concatenated.extend(result.concatenated_entries)
    return ParseResult(
        unique_keys=frozenset(keys),
        all_entries=tuple(entries),
        concatenated_entries=tuple(concatenated),
    )


def merge_definitions(sets: Iterable[Iterable[str]]) -> DefinedKeySet:
    keys: List[str] = []
    for defined in sets:
        keys.extend(defined)
    return DefinedKeySet(keys)
