"""
Decides which statements and specifiers the resolvers may touch.
"""

from .models import ModuleStatement


class SpecifierClassifier:
    """Classifies module statements and their specifiers."""

    @staticmethod
    def is_eligible(statement: ModuleStatement) -> bool:
        """Check whether a statement may be rewritten at all.

        Type-only statements are removed later in the build, so they are
        left alone. Statements without a source have nothing to rewrite.
        """
        if statement.is_type_only:
            return False
        return bool(statement.specifier)

    @staticmethod
    def is_relative(specifier: str) -> bool:
        return specifier.startswith('.')

    @staticmethod
    def matches_alias(specifier: str, key: str) -> bool:
        return specifier == key or specifier.startswith(f"{key}/")

