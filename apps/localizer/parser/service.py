from __future__ import annotations

import asyncio
import logging
import os
from typing import AbstractSet, Callable, Dict, Iterable, Iterator, List, Optional, Protocol, Sequence

from ..filesystem import FileSystemProvider, LocalFileSystem
from .aggregate import merge, merge_definitions
from .enumerator import enumerate_source_files
from .errors import ScanCancelled, SourceFileNotFoundError
from .models import DefinedKeySet, MissingKeyInfo, MissingKeyReport, ParseResult
from .reconcile import build_missing_report, reconcile
from .scanner import scan_definitions, scan_usages

logger = logging.getLogger(__name__)


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


ProgressCallback = Callable[[int, int], None]


def resolve_definition_paths(directory: str, definition_files: Iterable[str]) -> List[str]:
    return [p if os.path.isabs(p) else os.path.join(directory, p) for p in definition_files]


def _report(usage: ParseResult, per_file: Dict[str, DefinedKeySet]) -> MissingKeyReport:
    defined = merge_definitions(per_file.values())
    return build_missing_report(usage, defined, {p: len(keys) for p, keys in per_file.items()})


class LuaLocalizationParser:
    """Scans Lua addons for ``L["key"]`` usages and translation-table definitions.

    Holds only the file-system provider; every call builds fresh results.
    """

    def __init__(self, fs: Optional[FileSystemProvider] = None):
        self.fs: FileSystemProvider = fs or LocalFileSystem()

    # --- single files ---

    def _require_file(self, path: str) -> None:
        if not self.fs.file_exists(path):
            raise SourceFileNotFoundError(path)

    def _read(self, path: str) -> List[str]:
        self._require_file(path)
        try:
            return self.fs.read_lines(path)
        except OSError as e:
            # Deleted after listing, dangling symlink, or unreadable.
            raise SourceFileNotFoundError(path) from e

    async def _read_async(self, path: str) -> List[str]:
        self._require_file(path)
        try:
            return await self.fs.read_lines_async(path)
        except OSError as e:
            raise SourceFileNotFoundError(path) from e

    def scan_file(self, path: str) -> ParseResult:
        return scan_usages(path, self._read(path))

    async def scan_file_async(self, path: str) -> ParseResult:
        lines = await self._read_async(path)
        return scan_usages(path, lines)

    def scan_definition_file(self, path: str) -> DefinedKeySet:
        return scan_definitions(path, self._read(path))

    async def scan_definition_file_async(self, path: str) -> DefinedKeySet:
        lines = await self._read_async(path)
        return scan_definitions(path, lines)

    def scan_definition_files(self, paths: Sequence[str]) -> DefinedKeySet:
        return merge_definitions(self.scan_definition_file(p) for p in paths)

    async def scan_definition_files_async(self, paths: Sequence[str]) -> DefinedKeySet:
        sets = [await self.scan_definition_file_async(p) for p in paths]
        return merge_definitions(sets)

    # --- directories ---

    def _iter_file_results(
        self,
        files: List[str],
        cancel_event: Optional[CancelToken],
        on_progress: Optional[ProgressCallback],
    ) -> Iterator[ParseResult]:
        total = len(files)
        for done, path in enumerate(files, start=1):
            if cancel_event is not None and cancel_event.is_set():
                raise ScanCancelled(f"Scan cancelled after {done - 1} of {total} files")
            yield scan_usages(path, self._read(path))
            if on_progress:
                on_progress(done, total)

    def scan_directory(
        self,
        path: str,
        exclude_subdirs: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[CancelToken] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ParseResult:
        files = enumerate_source_files(self.fs, path, exclude_subdirs or ())
        logger.info("Scanning %d Lua files under %s", len(files), path)
        try:
            # merge() consumes one file at a time, so each result is folded in before the next file is read.
            result = merge(self._iter_file_results(files, cancel_event, on_progress))
        except ScanCancelled:
            logger.info("Scan of %s cancelled", path)
            raise
        logger.debug("Scan of %s found %d keys in %d entries", path, len(result.unique_keys), result.total_entries)
        return result

    async def scan_directory_async(
        self,
        path: str,
        exclude_subdirs: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[CancelToken] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ParseResult:
        # Walking a large tree blocks, so list it off the event loop too.
        files = await asyncio.to_thread(enumerate_source_files, self.fs, path, list(exclude_subdirs or ()))
        logger.info("Scanning %d Lua files under %s", len(files), path)
        total = len(files)
        results: List[ParseResult] = []
        for done, file_path in enumerate(files, start=1):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("Scan of %s cancelled", path)
                raise ScanCancelled(f"Scan cancelled after {done - 1} of {total} files")
            lines = await self._read_async(file_path)
            results.append(scan_usages(file_path, lines))
            if on_progress:
                on_progress(done, total)
        result = merge(results)
        logger.debug("Scan of %s found %d keys in %d entries", path, len(result.unique_keys), result.total_entries)
        return result

    # --- reconciliation ---

    @staticmethod
    def reconcile(usage: ParseResult, defined: AbstractSet[str]) -> Dict[str, MissingKeyInfo]:
        return reconcile(usage, defined)

    def _existing_definition_files(self, directory: str, definition_files: Iterable[str]) -> List[str]:
        found: List[str] = []
        for p in resolve_definition_paths(directory, definition_files):
            if self.fs.file_exists(p):
                found.append(p)
            else:
                logger.info("Definition file not found, skipping: %s", p)
        return found

    def find_missing_keys(
        self,
        directory: str,
        definition_files: Iterable[str],
        exclude_subdirs: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[CancelToken] = None,
    ) -> MissingKeyReport:
        """Scan ``directory`` and report keys with no entry in any definition file.

        Definition files are resolved against ``directory`` when relative;
        those that do not exist are skipped.
        """
        usage = self.scan_directory(directory, exclude_subdirs, cancel_event=cancel_event)
        per_file = {p: self.scan_definition_file(p) for p in self._existing_definition_files(directory, definition_files)}
        return _report(usage, per_file)

    async def find_missing_keys_async(
        self,
        directory: str,
        definition_files: Iterable[str],
        exclude_subdirs: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[CancelToken] = None,
    ) -> MissingKeyReport:
        usage = await self.scan_directory_async(directory, exclude_subdirs, cancel_event=cancel_event)
        per_file = {p: await self.scan_definition_file_async(p) for p in self._existing_definition_files(directory, definition_files)}
        return _report(usage, per_file)
