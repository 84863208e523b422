"""Prefix registry mapping namespace prefixes to base directories."""

import logging
import os
import threading
from collections.abc import Iterator

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "\\"

_PATH_SEPARATORS = os.sep + (os.altsep or "")


def normalize_prefix(prefix: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Strip surrounding separators and append exactly one.

    With the default separator, "Foo", "Foo\\" and "\\Foo\\" all yield "Foo\\".
    """
    return prefix.strip(separator) + separator


def normalize_directory(directory: str | os.PathLike[str]) -> str:
    """Return the directory as a string ending in exactly one path separator."""
    return os.fspath(directory).rstrip(_PATH_SEPARATORS) + os.sep


class PrefixRegistry:
    """Ordered mapping of normalized prefix to an ordered list of directories.

    Prefix insertion order is match priority; directory insertion order is
    probe order. There is no removal API.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        if not separator:
            raise ValueError("Namespace separator must be a non-empty string")
        self.separator = separator
        self._prefixes: dict[str, list[str]] = {}
        self._lock = threading.RLock()

    @property
    def lock(self):
        """Re-entrant lock guarding the mapping; hold it to make several calls atomic."""
        return self._lock

    def normalize_prefix(self, prefix: str) -> str:
        return normalize_prefix(prefix, self.separator)

    def add(self, prefix: str, directory: str | os.PathLike[str], *, unique: bool = False) -> bool:
        """Append a directory to a prefix's list, creating the list if absent.

        Args:
            prefix: Namespace prefix (normalized here)
            directory: Base directory (normalized here)
            unique: Skip the append when the directory is already listed

        Returns:
            True if the directory was appended
        """
        key = self.normalize_prefix(prefix)
        entry = normalize_directory(directory)
        with self._lock:
            directories = self._prefixes.setdefault(key, [])
            if unique and entry in directories:
                return False
            directories.append(entry)
        logger.debug(f"[registry:add] {key} -> {entry}")
        return True

    def has_directory(self, prefix: str, directory: str | os.PathLike[str]) -> bool:
        """Check whether a directory is already listed for a prefix."""
        key = self.normalize_prefix(prefix)
        with self._lock:
            return normalize_directory(directory) in self._prefixes.get(key, ())

    def directories(self, prefix: str) -> list[str]:
        """Get a copy of the directory list for a prefix (empty if unregistered)."""
        with self._lock:
            return list(self._prefixes.get(self.normalize_prefix(prefix), ()))

    def prefixes(self) -> list[str]:
        """Get registered prefixes in registration order."""
        with self._lock:
            return list(self._prefixes)

    def items(self) -> list[tuple[str, list[str]]]:
        """Snapshot of (prefix, directories) pairs in registration order."""
        with self._lock:
            return [(prefix, list(dirs)) for prefix, dirs in self._prefixes.items()]

    def __contains__(self, prefix: object) -> bool:
        if not isinstance(prefix, str):
            return False
        with self._lock:
            return self.normalize_prefix(prefix) in self._prefixes

    def __iter__(self) -> Iterator[str]:
        return iter(self.prefixes())

    def __len__(self) -> int:
        with self._lock:
            return len(self._prefixes)

    def __repr__(self) -> str:
        return f"PrefixRegistry(separator={self.separator!r}, prefixes={len(self)})"
