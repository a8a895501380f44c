"""
Shared fixtures for the specfix test suite.
"""

import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from specfix.fs_probe import MemoryFilesystem
from specfix.models import ResolutionContext

PROJECT_ROOT = '/project'
CURRENT_FILE = '/project/src/index.ts'


@pytest.fixture
def context():
    return ResolutionContext(filename=CURRENT_FILE, root=PROJECT_ROOT)


@pytest.fixture
def memory_fs():
    return MemoryFilesystem()


def write_files(base: Path, files: dict):
    """Create files below ``base`` from a {relative path: content} mapping."""
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
