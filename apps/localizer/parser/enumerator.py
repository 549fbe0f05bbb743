from __future__ import annotations

import os
from typing import Iterable, List

from ..filesystem import FileSystemProvider
from .errors import SourceDirectoryNotFoundError

SOURCE_EXTENSION = ".lua"


def _directory_segments(root: str, path: str) -> List[str]:
    rel = os.path.relpath(path, root)
    parts = rel.replace("\\", "/").split("/")
    # Last part is the file name, which exclusions never match.
    return parts[:-1]


def is_excluded(root: str, path: str, exclude_subdirs: Iterable[str]) -> bool:
    """True if a directory segment of ``path`` below ``root`` is in ``exclude_subdirs`` (any case)."""
    excluded = {name.casefold() for name in exclude_subdirs if name}
    if not excluded:
        return False
    return any(seg.casefold() in excluded for seg in _directory_segments(root, path))


def enumerate_source_files(
    fs: FileSystemProvider,
    root: str,
    exclude_subdirs: Iterable[str] = (),
) -> List[str]:
    if not fs.directory_exists(root):
        raise SourceDirectoryNotFoundError(root)

    files = fs.list_files(root, SOURCE_EXTENSION, recursive=True)
    excluded = [name for name in exclude_subdirs if name]
    if not excluded:
        return list(files)
    return [p for p in files if not is_excluded(root, p, excluded)]
