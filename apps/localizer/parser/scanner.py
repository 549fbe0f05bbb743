"""Line-oriented scanning of Lua source for ``L["key"]`` markers.

The scanner treats files as opaque text. Comments and ``[[ ... ]]`` long
strings are not recognised, so a marker inside them is still reported.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Set, Tuple

from .models import DefinedKeySet, LocalizationEntry, ParseResult

MARKER_OPEN = 'L["'
MARKER_CLOSE = '"]'
CONCAT_TOKEN = ".."


def iter_marker_spans(line: str) -> Iterator[Tuple[str, int]]:
    """Yield ``(key, end)`` for each ``L["key"]`` on the line, left to right.

    ``end`` is the index just past the closing ``]``. The key is the text up
    to the next double quote; it must be non-empty and the quote must be
    followed by ``]``. A rejected candidate resumes the search one character
    after its ``L``. Matches never overlap.
    """
    pos = 0
    while True:
        start = line.find(MARKER_OPEN, pos)
        if start < 0:
            return
        key_start = start + len(MARKER_OPEN)
        quote = line.find('"', key_start)
        if quote < 0:
            # No closing quote anywhere to the right, so no later marker can close either.
            return
        if quote > key_start and line.startswith(MARKER_CLOSE, quote):
            end = quote + len(MARKER_CLOSE)
            yield line[key_start:quote], end
            pos = end
        else:
            pos = start + 1


def iter_marker_keys(line: str) -> Iterator[str]:
    for key, _ in iter_marker_spans(line):
        yield key


def has_concatenation(line: str) -> bool:
    return CONCAT_TOKEN in line


def _is_assignment(line: str, index: int) -> bool:
    # `=` after optional whitespace, and not the first half of `==`.
    n = len(line)
    while index < n and line[index].isspace():
        index += 1
    return index < n and line[index] == "=" and not line.startswith("==", index)


def scan_usages(path: str, lines: Iterable[str]) -> ParseResult:
    keys: Set[str] = set()
    entries: List[LocalizationEntry] = []
    concatenated: List[LocalizationEntry] = []

    for line_number, line in enumerate(lines, start=1):
        found = list(iter_marker_keys(line))
        if not found:
            continue
        # The flag belongs to the line, so every key on it shares it.
        concat = has_concatenation(line)
        raw = line.strip()
        for key in found:
            entry = LocalizationEntry(
                key=key,
                file_path=path,
                line_number=line_number,
                has_concatenation=concat,
                raw_line=raw,
            )
            keys.add(key)
            entries.append(entry)
            if concat:
                concatenated.append(entry)

    return ParseResult(
        unique_keys=frozenset(keys),
        all_entries=tuple(entries),
        concatenated_entries=tuple(concatenated),
    )


def scan_definitions(path: str, lines: Iterable[str]) -> DefinedKeySet:
    """Collect keys assigned in a translation table (``L["key"] = ...``).

    Reads such as ``print(L["key"])`` or ``x = L["key"]`` and comparisons
    (``L["key"] == y``) are ignored. ``path`` is accepted for symmetry with
    ``scan_usages``; definitions carry no location.
    """
    _ = path
    keys: List[str] = []
    for line in lines:
        for key, end in iter_marker_spans(line):
            if _is_assignment(line, end):
                keys.append(key)
    return DefinedKeySet(keys)

