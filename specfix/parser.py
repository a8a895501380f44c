"""
Tree-sitter based extraction of import/export statements.
"""

import re
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from .exceptions import ParsingError, UnsupportedLanguageError
from .models import ModuleStatement, StatementKind

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Tree-sitter language setup
# -------------------------------------------------------------------
GRAMMAR_BY_EXTENSION = {
    '.js': 'javascript',
    '.jsx': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
    '.ts': 'typescript',
    '.mts': 'typescript',
    '.cts': 'typescript',
    '.tsx': 'tsx',
}

_GRAMMAR_LOADERS = {
    'javascript': tree_sitter_javascript.language,
    'typescript': tree_sitter_typescript.language_typescript,
    'tsx': tree_sitter_typescript.language_tsx,
}

_LANGUAGE_CACHE: Dict[str, Language] = {}

STATEMENT_TYPES = ('import_statement', 'export_statement')

# `import type ...` / `export type ...`, but not a default import named `type`.
# Read from the statement text since grammars without the syntax
# (Flow in .js, `export type *`) leave the keyword inside an ERROR node.
_TYPE_ONLY = re.compile(rb'(?:import|export)\s+type(?=[\s{*])(?!\s+from\b)')
_EXPORT_ALL = re.compile(rb'export\s+(?:type\s+)?\*(?!\s*as\b)')


def is_supported(file_path: Union[str, Path]) -> bool:
    """Check whether a file can be parsed for module statements."""
    return Path(file_path).suffix.lower() in GRAMMAR_BY_EXTENSION


def get_language(file_path: Union[str, Path]) -> Language:
    """Return the tree-sitter language for a source file, by suffix."""
    suffix = Path(file_path).suffix.lower()
    grammar = GRAMMAR_BY_EXTENSION.get(suffix)
    if grammar is None:
        raise UnsupportedLanguageError(str(file_path), suffix)

    if grammar not in _LANGUAGE_CACHE:
        _LANGUAGE_CACHE[grammar] = Language(_GRAMMAR_LOADERS[grammar]())
        logger.debug(f"Loaded tree-sitter language '{grammar}'")
    return _LANGUAGE_CACHE[grammar]


class ModuleStatementParser:
    """Parses source files and extracts module statements."""

    def parse(self, source: Union[str, bytes], file_path: Union[str, Path]) -> List[ModuleStatement]:
        """
        Parse a source file and return its import/export statements.

        Args:
            source: File contents
            file_path: Path used to select the grammar (and for error reports)

        Returns:
            Statements in source order; byte offsets refer to the UTF-8 encoded source
        """
        source_bytes = source.encode('utf-8') if isinstance(source, str) else source
        parser = Parser(get_language(file_path))
        tree = parser.parse(source_bytes)
        if tree is None or tree.root_node is None:
            raise ParsingError(str(file_path), "tree-sitter returned no syntax tree")

        if tree.root_node.has_error:
            logger.debug(f"Syntax errors in {file_path}, continuing with recovered tree")

        statements = []
        # Iterative walk, deeply nested expressions would exhaust the recursion limit
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type in STATEMENT_TYPES:
                statements.append(self._build_statement(node, source_bytes))
                continue
            stack.extend(reversed(node.children))
        return statements

    def _build_statement(self, node: Any, source: bytes) -> ModuleStatement:
        """Create a ModuleStatement from an import_statement/export_statement node."""
        text = source[node.start_byte:node.end_byte]
        if node.type == 'import_statement':
            kind = StatementKind.IMPORT
        elif _EXPORT_ALL.match(text):
            kind = StatementKind.EXPORT_ALL
        else:
            kind = StatementKind.NAMED_EXPORT

        statement = ModuleStatement(
            kind=kind,
            is_type_only=bool(_TYPE_ONLY.match(text)),
            line_number=node.start_point[0] + 1,
        )

        source_node = node.child_by_field_name('source')
        if source_node is not None and source_node.type == 'string':
            start, end = self._literal_range(source_node)
            statement.specifier = source[start:end].decode('utf-8')
            statement.original_specifier = statement.specifier
            statement.start_byte = start
            statement.end_byte = end
            statement.quote = chr(source[source_node.start_byte])
        return statement

    @staticmethod
    def _literal_range(string_node: Any) -> tuple:
        """Byte range of a string literal without its quotes."""
        return string_node.start_byte + 1, string_node.end_byte - 1
