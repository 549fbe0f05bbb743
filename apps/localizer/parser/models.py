from __future__ import annotations

from collections.abc import Set as AbstractSet
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .formats import format_parameters


def normalize_key(key: str) -> str:
    return key.casefold()


class LocalizationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    file_path: str
    line_number: int  # 1-based
    has_concatenation: bool = False
    raw_line: str = ""  # trimmed source line


class ParseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    unique_keys: FrozenSet[str] = Field(default_factory=frozenset)
    # Every occurrence, duplicates included, in scan order.
    all_entries: Tuple[LocalizationEntry, ...] = ()
    # Subset of all_entries whose line carries a `..` concatenation.
    concatenated_entries: Tuple[LocalizationEntry, ...] = ()

    @property
    def total_entries(self) -> int:
        return len(self.all_entries)

    @property
    def concatenated_count(self) -> int:
        return len(self.concatenated_entries)

    @property
    def format_entries(self) -> List[LocalizationEntry]:
        """Entries whose key carries string.format specifiers (`%s`, `%d`, ...)."""
        return [e for e in self.all_entries if format_parameters(e.key)]

    def entries_for(self, key: str) -> List[LocalizationEntry]:
        return [e for e in self.all_entries if e.key == key]


class DefinedKeySet(AbstractSet):
    """Immutable set of defined keys with case-insensitive membership.

    Keys are normalized with ``casefold()`` on the way in and on lookup.
    Iteration yields the first spelling seen for each key.
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[str] = ()):
        store: Dict[str, str] = {}
        for key in keys:
            store.setdefault(normalize_key(key), key)
        self._keys = store

    @classmethod
    def _from_iterable(cls, it: Iterable[str]) -> "DefinedKeySet":
        return cls(it)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"DefinedKeySet({sorted(self._keys.values())!r})"

    __hash__ = AbstractSet._hash


class KeyLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_path: str
    line_number: int


class MissingKeyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    occurrence_count: int
    locations: Tuple[KeyLocation, ...] = ()
    has_concatenation: bool = False
    # Specifiers a translation must keep, in order.
    format_parameters: Tuple[str, ...] = ()


class MissingKeyReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_keys: int
    defined_keys: int
    localized_keys: int
    missing: Dict[str, MissingKeyInfo] = Field(default_factory=dict)
    # Defined-key count per definition file that was read.
    definition_counts: Dict[str, int] = Field(default_factory=dict)

    @property
    def missing_count(self) -> int:
        return len(self.missing)

    def plain_missing(self) -> List[MissingKeyInfo]:
        return sorted((i for i in self.missing.values() if not i.has_concatenation), key=lambda i: i.key)

    def concatenated_missing(self) -> List[MissingKeyInfo]:
        return sorted((i for i in self.missing.values() if i.has_concatenation), key=lambda i: i.key)


# --- API request / response bodies ---


class ScanFileRequest(BaseModel):
    path: str


class ScanDirectoryRequest(BaseModel):
    path: str

    # If omitted, the configured EXCLUDED_SUBDIRS apply.
    exclude_subdirs: Optional[List[str]] = None


class DefinitionsRequest(BaseModel):
    paths: List[str]


class MissingKeysRequest(BaseModel):
    directory: str

    # Relative paths resolve against `directory`. If omitted, DEFINITION_FILES apply.
    definition_files: Optional[List[str]] = None
    exclude_subdirs: Optional[List[str]] = None


class ParseResultResponse(BaseModel):
    unique_keys: List[str]
    total_entries: int
    concatenated_count: int
    format_count: int
    entries: List[LocalizationEntry]

    @classmethod
    def from_result(cls, result: ParseResult) -> "ParseResultResponse":
        return cls(
            unique_keys=sorted(result.unique_keys),
            total_entries=result.total_entries,
            concatenated_count=result.concatenated_count,
            format_count=len(result.format_entries),
            entries=list(result.all_entries),
        )


class DefinitionsResponse(BaseModel):
    keys: List[str]
    total: int


class MissingKeysResponse(BaseModel):
    total_keys: int
    defined_keys: int
    localized_keys: int
    missing_count: int
    plain: List[MissingKeyInfo]
    concatenated: List[MissingKeyInfo]
    definition_counts: Dict[str, int]

    @classmethod
    def from_report(cls, report: MissingKeyReport) -> "MissingKeysResponse":
        return cls(
            total_keys=report.total_keys,
            defined_keys=report.defined_keys,
            localized_keys=report.localized_keys,
            missing_count=report.missing_count,
            plain=report.plain_missing(),
            concatenated=report.concatenated_missing(),
            definition_counts=dict(report.definition_counts),
        )
