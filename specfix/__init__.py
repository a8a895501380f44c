"""
specfix

Rewrites import/export specifiers of JavaScript/TypeScript sources while
packaging a library: configured aliases are resolved and relative
specifiers get explicit extensions.
"""

from .models import AliasTable, ExtensionChoice, ModuleStatement, ResolutionContext, StatementKind
from .fs_probe import FilesystemProbe, LocalFilesystem, MemoryFilesystem
from .parser import ModuleStatementParser
from .config_loader import ConfigLoader, RewriterOptions
from .transformer import RewriteResult, SpecifierRewriter
from .exceptions import ConfigurationError, RewriterError

__version__ = '0.1.0'

__all__ = [
    'AliasTable', 'ExtensionChoice', 'ModuleStatement', 'ResolutionContext', 'StatementKind',
    'FilesystemProbe', 'LocalFilesystem', 'MemoryFilesystem', 'ModuleStatementParser',
    'ConfigLoader', 'RewriterOptions', 'RewriteResult', 'SpecifierRewriter',
    'ConfigurationError', 'RewriterError',
]
