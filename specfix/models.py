"""
Data models for the specifier rewriter.
"""

import os
from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple
from pathlib import Path

from .exceptions import ConfigurationError


class PathUtils:
    """Cross-platform path normalization utilities."""

    @staticmethod
    def normalize(path: str) -> str:
        """
        Convert any path to forward slashes for consistency.

        Args:
            path: Path string (may contain backslashes on Windows)

        Returns:
            Path with forward slashes (POSIX style)
        """
        if not path:
            return path
        return str(Path(path).as_posix())

    @staticmethod
    def relative(path: str, start: str) -> str:
        """
        Get the relative path from ``start`` to ``path`` with forward slashes.

        Unlike ``Path.relative_to`` this walks up with ``..`` segments when
        ``path`` is not below ``start``.
        """
        return PathUtils.normalize(os.path.relpath(path, start))


class StatementKind(Enum):
    """Import/export statement shapes that can carry a specifier."""
    IMPORT = "import"
    NAMED_EXPORT = "named_export"
    EXPORT_ALL = "export_all"


class ExtensionChoice(Enum):
    """Explicit extension appended to relative specifiers."""
    CJS = "cjs"
    MJS = "mjs"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional['ExtensionChoice']:
        """Convert a configured value, ``None`` disables extension handling."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).lstrip('.'))
        except ValueError:
            allowed = ', '.join(choice.value for choice in cls)
            raise ConfigurationError(
                f"Invalid extension '{value}', expected one of: {allowed}"
            )


@dataclass
class ModuleStatement:
    """An import/export statement found in a source file."""
    kind: StatementKind
    specifier: Optional[str] = None
    is_type_only: bool = False
    # Byte range of the literal contents (quotes excluded)
    start_byte: int = 0
    end_byte: int = 0
    quote: str = "'"
    line_number: int = 0
    original_specifier: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        if self.original_specifier is None:
            self.original_specifier = self.specifier

    @property
    def changed(self) -> bool:
        return self.specifier != self.original_specifier


@dataclass(frozen=True)
class AliasTable:
    """Ordered alias entries; the first matching key wins."""
    entries: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Optional[Dict[str, str]]) -> 'AliasTable':
        if not mapping:
            return cls()
        entries = []
        for key, value in mapping.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigurationError(
                    f"Alias entries must map strings to strings, got {key!r}: {value!r}"
                )
            entries.append((key, value))
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.entries)


@dataclass(frozen=True)
class ResolutionContext:
    """Per-file data shared by the resolvers while one file is visited."""
    filename: Optional[str]
    root: str

    def require_filename(self) -> str:
        if self.filename is None:
            raise ConfigurationError("Couldn't find a filename for the current file.")
        return self.filename

    @property
    def directory(self) -> str:
        return os.path.dirname(self.require_filename())
