"""
Resolver package for module specifier rewriting.
"""

from .alias_resolver import AliasResolver
from .extension_resolver import ExtensionResolver, PLATFORM_SUFFIXES, SOURCE_EXTENSIONS

__all__ = [
    'AliasResolver',
    'ExtensionResolver',
    'PLATFORM_SUFFIXES',
    'SOURCE_EXTENSIONS',
]
