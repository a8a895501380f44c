"""
Filesystem queries used by the extension resolver.

This is the only place the rewriter touches the disk. Probes never raise
for a missing path; any other OS error propagates to the caller.
"""

import os
import stat
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set


class FilesystemProbe(ABC):
    """Read-only file/directory existence checks."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check whether a regular file exists at ``path``."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether a directory exists at ``path``."""
        pass


class LocalFilesystem(FilesystemProbe):
    """Probe backed by the real filesystem. Symlinks are followed."""

    def _mode(self, path: str) -> Optional[int]:
        try:
            return os.stat(path).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return None

    def is_file(self, path: str) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISREG(mode)

    def is_dir(self, path: str) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISDIR(mode)


class MemoryFilesystem(FilesystemProbe):
    """In-memory probe for deterministic resolution tests.

    Directories are implied by the parents of every registered file;
    empty directories can be added explicitly.
    """

    def __init__(self, files: Iterable[str] = (), directories: Iterable[str] = ()):
        self.files: Set[str] = set()
        self.directories: Set[str] = set()
        for path in files:
            self.add_file(path)
        for path in directories:
            self.add_directory(path)

    @staticmethod
    def _key(path: str) -> str:
        return os.path.normpath(os.path.abspath(path))

    def add_file(self, path: str):
        key = self._key(path)
        self.files.add(key)
        self.add_directory(os.path.dirname(key))

    def add_directory(self, path: str):
        key = self._key(path)
        while key not in self.directories:
            self.directories.add(key)
            parent = os.path.dirname(key)
            if parent == key:
                break
            key = parent

    def is_file(self, path: str) -> bool:
        return self._key(path) in self.files

    def is_dir(self, path: str) -> bool:
        return self._key(path) in self.directories
