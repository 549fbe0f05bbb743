from __future__ import annotations


class LocalizationScanError(Exception):
    pass


class SourceFileNotFoundError(LocalizationScanError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class SourceDirectoryNotFoundError(LocalizationScanError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Directory not found: {path}")
        self.path = path


class ScanCancelled(Exception):
    """Raised between files when a directory scan is asked to stop.

    Not a ``LocalizationScanError``: the caller asked for it, nothing went wrong.
    """
