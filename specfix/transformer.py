"""
Rewrite driver: visits module statements and writes resolved specifiers back.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .classifier import SpecifierClassifier
from .config_loader import RewriterOptions
from .fs_probe import FilesystemProbe, LocalFilesystem
from .models import ModuleStatement, ResolutionContext
from .parser import ModuleStatementParser, is_supported
from .resolvers import AliasResolver, ExtensionResolver

logger = logging.getLogger(__name__)

EXCLUDED_DIRS = {'node_modules', '.git'}
DECLARATION_SUFFIXES = ('.d.ts', '.d.mts', '.d.cts')


@dataclass
class RewriteResult:
    """Outcome of rewriting a single source file."""
    filename: Optional[str]
    code: str
    statements: List[ModuleStatement] = field(default_factory=list)
    changed: bool = False

    @property
    def rewritten(self) -> List[ModuleStatement]:
        return [statement for statement in self.statements if statement.changed]


class SpecifierRewriter:
    """Applies alias and extension resolution to every module statement of a file."""

    def __init__(
        self,
        options: Optional[RewriterOptions] = None,
        probe: Optional[FilesystemProbe] = None,
        parser: Optional[ModuleStatementParser] = None
    ):
        """Initialize the rewriter.

        Args:
            options: Alias table and target extension
            probe: Filesystem probe used by the extension resolver
            parser: Statement parser, defaults to the tree-sitter parser
        """
        self.options = options or RewriterOptions()
        self.parser = parser or ModuleStatementParser()
        self.alias_resolver = AliasResolver(self.options.alias)
        self.extension_resolver = ExtensionResolver(self.options.extension, probe or LocalFilesystem())

    def visit(self, statement: ModuleStatement, context: ResolutionContext) -> ModuleStatement:
        """Rewrite one statement's specifier in place and return the statement."""
        if not SpecifierClassifier.is_eligible(statement):
            return statement

        statement.specifier = self.alias_resolver.resolve(statement.specifier, context)
        statement.specifier = self.extension_resolver.resolve(statement.specifier, context)

        if statement.changed:
            logger.debug(
                f"{context.filename}:{statement.line_number} "
                f"'{statement.original_specifier}' -> '{statement.specifier}'"
            )
        return statement

    def transform_source(self, source: str, filename: Optional[str], root: Optional[str] = None) -> RewriteResult:
        """
        Rewrite the module specifiers of a source string.

        Args:
            source: File contents
            filename: Absolute path of the file the source belongs to
            root: Directory relative alias targets are resolved against (default: cwd)

        Returns:
            RewriteResult with the new code and the visited statements
        """
        context = ResolutionContext(
            filename=os.path.abspath(filename) if filename is not None else None,
            root=os.path.abspath(root or os.getcwd()),
        )
        source_bytes = source.encode('utf-8')
        # Grammar selection needs a suffix even when no filename was given
        statements = self.parser.parse(source_bytes, filename or 'module.js')

        for statement in statements:
            self.visit(statement, context)

        code = self._apply(source_bytes, statements).decode('utf-8')
        return RewriteResult(
            filename=context.filename,
            code=code,
            statements=statements,
            changed=code != source,
        )

    def transform_file(self, path: Union[str, Path], root: Optional[str] = None, write: bool = True) -> RewriteResult:
        """Rewrite a file, writing it back when ``write`` is set and it changed."""
        path = Path(path)
        source = path.read_text(encoding='utf-8')
        result = self.transform_source(source, str(path), root)

        if result.changed:
            logger.info(f"Rewrote {len(result.rewritten)} specifier(s) in {path}")
            if write:
                path.write_text(result.code, encoding='utf-8')
        return result

    def transform_directory(
        self,
        directory: Union[str, Path],
        root: Optional[str] = None,
        write: bool = True
    ) -> List[RewriteResult]:
        """Rewrite every supported source file below ``directory``."""
        results = []
        for path in iter_source_files(directory):
            results.append(self.transform_file(path, root, write))

        changed = sum(1 for result in results if result.changed)
        logger.info(f"Processed {len(results)} file(s) in {directory}, {changed} changed")
        return results

    @staticmethod
    def _apply(source: bytes, statements: List[ModuleStatement]) -> bytes:
        """Splice rewritten specifiers into the source, back to front."""
        output = source
        for statement in sorted(statements, key=lambda s: s.start_byte, reverse=True):
            if not statement.changed:
                continue
            value = statement.specifier.replace(statement.quote, f'\\{statement.quote}')
            output = output[:statement.start_byte] + value.encode('utf-8') + output[statement.end_byte:]
        return output


def iter_source_files(directory: Union[str, Path]) -> List[Path]:
    """List rewritable source files below a directory, sorted."""
    files = []
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDED_DIRS)
        for name in sorted(filenames):
            if name.endswith(DECLARATION_SUFFIXES) or not is_supported(name):
                continue
            files.append(Path(dirpath) / name)
    return sorted(files)
