"""
Extension resolver for relative module specifiers.

Runtimes that load the packaged output do not resolve extensionless or
directory specifiers, so relative specifiers get an explicit extension:

- Explicit TypeScript files: './foo.ts' -> './foo.mjs'
- Extensionless modules: './foo' -> './foo.mjs'
- Directory imports: './bar' -> './bar/index.mjs'

Modules with platform-specific siblings (foo.native.ts, foo.ios.ts, ...)
are left alone since the bundler picks the variant itself and an explicit
extension would bypass that.
"""

import os
import re
from typing import Optional

from ..classifier import SpecifierClassifier
from ..fs_probe import FilesystemProbe, LocalFilesystem
from ..models import ExtensionChoice, ResolutionContext

SOURCE_EXTENSIONS = ('js', 'ts', 'jsx', 'tsx')
PLATFORM_SUFFIXES = ('native', 'android', 'ios', 'web')

_TS_SUFFIX = re.compile(r'\.tsx?\Z')


class ExtensionResolver:
    """Adds explicit extensions to relative specifiers."""

    def __init__(self, extension: Optional[ExtensionChoice], probe: Optional[FilesystemProbe] = None):
        """
        Initialize extension resolver.

        Args:
            extension: Target extension, ``None`` disables the resolver
            probe: Filesystem probe, defaults to the local filesystem
        """
        self.extension = extension
        self.probe = probe or LocalFilesystem()

    def resolve(self, specifier: str, context: ResolutionContext) -> str:
        """
        Resolve the explicit-extension form of a specifier.

        Args:
            specifier: The (possibly aliased) specifier
            context: Per-file resolution context

        Returns:
            The rewritten specifier, or the input unchanged when no rule applies
        """
        if self.extension is None or not SpecifierClassifier.is_relative(specifier):
            return specifier

        ext = self.extension.value
        candidate = os.path.normpath(os.path.join(context.directory, specifier))

        # Explicitly imported file, only a TypeScript suffix is swapped
        if self.probe.is_file(candidate):
            return _TS_SUFFIX.sub(f'.{ext}', specifier, count=1)

        if self.is_module(candidate):
            return f'{specifier}.{ext}'

        if self.probe.is_dir(candidate) and self.is_module(os.path.join(candidate, 'index')):
            base = specifier[:-1] if specifier.endswith('/') else specifier
            return f'{base}/index.{ext}'

        return specifier

    def is_module(self, path: str) -> bool:
        """
        Check whether ``path`` plus a known extension is a module file
        without platform-specific variants.

        Args:
            path: Absolute path without extension
        """
        for ext in SOURCE_EXTENSIONS + (self.extension.value,):
            if not self.probe.is_file(f'{path}.{ext}'):
                continue
            if not any(self.probe.is_file(f'{path}.{platform}.{ext}') for platform in PLATFORM_SUFFIXES):
                return True
        return False
