from __future__ import annotations

from typing import AbstractSet, Dict, List, Mapping, Optional

from .formats import format_parameters
from .models import DefinedKeySet, KeyLocation, LocalizationEntry, MissingKeyInfo, MissingKeyReport, ParseResult


def _as_defined(defined: AbstractSet[str]) -> DefinedKeySet:
    if isinstance(defined, DefinedKeySet):
        return defined
    return DefinedKeySet(defined)


def reconcile(usage: ParseResult, defined: AbstractSet[str]) -> Dict[str, MissingKeyInfo]:
    """Used keys with no definition, grouped with their occurrences.

    Comparison against ``defined`` ignores case. The mapping is ordered by
    each key's first occurrence in ``usage.all_entries``.
    """
    known = _as_defined(defined)
    missing = {key for key in usage.unique_keys if key not in known}
    if not missing:
        return {}

    grouped: Dict[str, List[LocalizationEntry]] = {}
    for entry in usage.all_entries:
        if entry.key in missing:
            grouped.setdefault(entry.key, []).append(entry)

    return {
        key: MissingKeyInfo(
            key=key,
            occurrence_count=len(entries),
            locations=tuple(KeyLocation(file_path=e.file_path, line_number=e.line_number) for e in entries),
            has_concatenation=any(e.has_concatenation for e in entries),
            format_parameters=format_parameters(key),
        )
        for key, entries in grouped.items()
    }


def build_missing_report(
    usage: ParseResult,
    defined: AbstractSet[str],
    definition_counts: Optional[Mapping[str, int]] = None,
) -> MissingKeyReport:
    known = _as_defined(defined)
    missing = reconcile(usage, known)
    total = len(usage.unique_keys)
    return MissingKeyReport(
        total_keys=total,
        defined_keys=len(known),
        localized_keys=total - len(missing),
        missing=missing,
        definition_counts=dict(definition_counts or {}),
    )
