"""Prefix resolver: maps a symbolic name to a source file path.

Resolution order (first match wins):
1. Registered prefixes are tested in registration order
2. The first prefix the name starts with is stripped
3. The remainder becomes a relative path under each of that prefix's
   directories, probed in order

A prefix whose directories all miss hands over to the next matching prefix.
The first readable file ends the lookup. Misses are reported as None and
never raise or log.
"""

import os
from collections.abc import Iterator

from .registry import PrefixRegistry

DEFAULT_EXTENSION = ".py"


def is_readable_file(path: str) -> bool:
    """Check that path is a regular file the process can read."""
    return os.path.isfile(path) and os.access(path, os.R_OK)


class Resolver:
    """Resolves symbolic names against a PrefixRegistry."""

    def __init__(self, registry: PrefixRegistry, extension: str = DEFAULT_EXTENSION):
        self.registry = registry
        self.extension = extension

    def relative_path(self, remainder: str) -> str:
        """Translate a name remainder into a relative file path.

        Every namespace separator becomes an OS path separator, and the
        source extension is appended.
        """
        return remainder.replace(self.registry.separator, os.sep) + self.extension

    def iter_candidates(self, name: str) -> Iterator[tuple[str, str]]:
        """Yield (prefix, candidate path) pairs in probe order.

        Does not touch the filesystem.
        """
        for prefix, directories in self.registry.items():
            if not name.startswith(prefix):
                continue
            relative = self.relative_path(name[len(prefix) :])
            for directory in directories:
                yield prefix, directory + relative

    def probe(self, directories: list[str], remainder: str) -> str | None:
        """Return the first readable file for remainder under directories."""
        relative = self.relative_path(remainder)
        for directory in directories:
            candidate = directory + relative
            if is_readable_file(candidate):
                return candidate
        return None

    def resolve(self, name: str) -> str | None:
        """Resolve a symbolic name to a readable source file.

        Args:
            name: Fully-qualified symbolic name (e.g., "Acme\\Util\\Widget")

        Returns:
            Path of the first readable candidate, or None if not found
        """
        for prefix, directories in self.registry.items():
            if not name.startswith(prefix):
                continue
            found = self.probe(directories, name[len(prefix) :])
            if found:
                return found
        return None

    def __repr__(self) -> str:
        return f"Resolver(extension={self.extension!r}, registry={self.registry!r})"
