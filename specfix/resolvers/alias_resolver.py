"""
Alias resolver for module specifiers.

Handles:
- Exact aliases: '@lib' -> './src/lib'
- Prefix aliases: '@lib/utils' -> './src/lib/utils'
- Bare module aliases: 'old-package' -> 'new-package'
"""

import os
from typing import Optional

from ..classifier import SpecifierClassifier
from ..models import AliasTable, PathUtils, ResolutionContext


class AliasResolver:
    """Rewrites specifiers that match a configured alias key."""

    def __init__(self, alias_table: Optional[AliasTable]):
        """
        Initialize alias resolver.

        Args:
            alias_table: Ordered alias entries, None disables aliasing
        """
        self.alias_table = alias_table

    def resolve(self, specifier: str, context: ResolutionContext) -> str:
        """
        Apply the first matching alias to a specifier.

        Args:
            specifier: The specifier as written in source
            context: Per-file resolution context

        Returns:
            The aliased specifier, or the input unchanged when nothing matches
        """
        if self.alias_table is None:
            return specifier
        context.require_filename()

        for key, value in self.alias_table:
            if SpecifierClassifier.matches_alias(specifier, key):
                resolved = self._resolve_target(value, context)
                return resolved + specifier[len(key):]

        return specifier

    def _resolve_target(self, value: str, context: ResolutionContext) -> str:
        """Turn an alias target into a specifier usable from the current file."""
        if not SpecifierClassifier.is_relative(value):
            return value

        target = os.path.abspath(os.path.join(context.root, value))
        return PathUtils.relative(target, context.directory)
