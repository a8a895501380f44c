"""
Relocation of generated Android codegen sources.

React Native codegen emits module specs under the fixed Java package
``com.facebook.fbreact.specs``. Libraries declare their own package in
``codegenConfig.android.javaPackageName``; the generated module specs are
moved there and their package declaration is rewritten. View manager
interfaces (``com.facebook.react.viewmanagers``) stay where they are.
"""

import os
import shutil
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import CodegenError

logger = logging.getLogger(__name__)

CODEGEN_DOCS = 'https://reactnative.dev/docs/the-new-architecture/using-codegen'
CODEGEN_JAVA_PACKAGE = 'com.facebook.fbreact.specs'


class Report(ABC):
    """Reporting sink used by the packaging steps."""

    @abstractmethod
    def info(self, message: str):
        pass

    @abstractmethod
    def warn(self, message: str):
        pass

    @abstractmethod
    def error(self, message: str):
        pass

    @abstractmethod
    def success(self, message: str):
        pass


class LoggingReport(Report):
    """Report that forwards to the logging module."""

    def __init__(self, name: str = __name__):
        self.logger = logging.getLogger(name)

    def info(self, message: str):
        self.logger.info(message)

    def warn(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def success(self, message: str):
        self.logger.info(message)


def _package_path(root: Path, package_name: str) -> Path:
    return root.joinpath(*package_name.split('.'))


def patch_codegen_android_package(
    project_path: Union[str, Path],
    package_json: Dict[str, Any],
    report: Optional[Report] = None
) -> Optional[Path]:
    """
    Move generated module specs into the library's Java package.

    Args:
        project_path: Root of the library project
        package_json: Parsed package.json of the library
        report: Reporting sink, defaults to logging

    Returns:
        Directory the specs were moved to, or None when there was nothing to move
    """
    report = report or LoggingReport()
    project_path = Path(project_path)
    codegen_config = package_json.get('codegenConfig') or {}

    android_output = (codegen_config.get('outputDir') or {}).get('android')
    if not android_output:
        raise CodegenError(
            f"Your package.json doesn't contain codegenConfig.outputDir.android. Please see {CODEGEN_DOCS}",
            str(project_path)
        )

    codegen_android_path = (project_path / android_output).resolve()
    if not codegen_android_path.exists():
        raise CodegenError(
            f"The codegen android path defined in your package.json: {codegen_android_path} doesn't exist.",
            str(project_path)
        )

    java_package_name = (codegen_config.get('android') or {}).get('javaPackageName')
    if not java_package_name:
        raise CodegenError(
            f"Your package.json doesn't contain codegenConfig.android.javaPackageName. Please see {CODEGEN_DOCS}",
            str(project_path)
        )

    java_root = codegen_android_path / 'java'
    old_package_path = _package_path(java_root, CODEGEN_JAVA_PACKAGE)
    new_package_path = _package_path(java_root, java_package_name)

    if not old_package_path.is_dir():
        if codegen_config.get('type') == 'components':
            report.info("No generated module specs found, skipping package patching")
            return None
        raise CodegenError(
            f"The codegen java package path {old_package_path} doesn't exist.",
            str(project_path)
        )

    if old_package_path == new_package_path:
        logger.debug(f"Codegen package is already {java_package_name}")
        return None

    new_package_path.mkdir(parents=True, exist_ok=True)
    old_declaration = f'package {CODEGEN_JAVA_PACKAGE};'
    new_declaration = f'package {java_package_name};'

    moved = 0
    for source_file in sorted(old_package_path.iterdir()):
        if not source_file.is_file() or source_file.suffix != '.java':
            continue
        content = source_file.read_text(encoding='utf-8')
        target_file = new_package_path / source_file.name
        target_file.write_text(content.replace(old_declaration, new_declaration), encoding='utf-8')
        source_file.unlink()
        moved += 1

    if old_package_path not in new_package_path.parents:
        shutil.rmtree(old_package_path)
        _prune_empty_parents(old_package_path.parent, java_root)

    report.success(f"Moved {moved} codegen module spec(s) to {new_package_path}")
    return new_package_path


def _prune_empty_parents(directory: Path, stop: Path):
    """Remove empty directories from ``directory`` up to, not including, ``stop``."""
    while directory != stop and stop in directory.parents:
        if any(directory.iterdir()):
            break
        os.rmdir(directory)
        directory = directory.parent
