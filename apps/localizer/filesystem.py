from __future__ import annotations

import asyncio
import os
from typing import List, Protocol


class FileSystemProvider(Protocol):
    """Read-only view of the file system consumed by the parser."""

    def file_exists(self, path: str) -> bool: ...

    def directory_exists(self, path: str) -> bool: ...

    def list_files(self, path: str, extension: str, recursive: bool = True) -> List[str]: ...

    def read_lines(self, path: str) -> List[str]: ...

    async def read_lines_async(self, path: str) -> List[str]: ...


class LocalFileSystem:
    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def directory_exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_files(self, path: str, extension: str, recursive: bool = True) -> List[str]:
        """List files under ``path`` whose suffix matches ``extension``.

        Walks depth-first with names sorted inside each directory, so a
        directory's own files come before the files of its subdirectories.
        The suffix comparison ignores case (``.LUA`` matches ``.lua``).
        """
        ext = extension.lower()
        out: List[str] = []
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames.sort(key=str.lower)
            for name in sorted(filenames, key=str.lower):
                if name.lower().endswith(ext):
                    out.append(os.path.join(dirpath, name))
            if not recursive:
                break
        return out

    def read_lines(self, path: str) -> List[str]:
        # Universal newlines: \r\n and bare \r both end a line.
        with open(path, "r", encoding=self.encoding, errors="replace") as f:
            return [line.rstrip("\n") for line in f]

    async def read_lines_async(self, path: str) -> List[str]:
        return await asyncio.to_thread(self.read_lines, path)
