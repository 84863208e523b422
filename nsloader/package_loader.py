"""Package loader: one namespace prefix per package root.

The root directory is walked once at registration time and every
subdirectory is added to the prefix's directory list, so a class file nested
anywhere under the root is reachable through the single flat prefix.
The walk is a snapshot; directories created later are not discovered.
"""

import logging
import os
from collections.abc import Mapping

from .loaders import BaseLoader
from .loaders import DirectoryArg
from .registry import normalize_directory

logger = logging.getLogger(__name__)


def _subdirectories(directory: str) -> list[os.DirEntry]:
    """Directory entries directly under directory, sorted by name."""
    try:
        with os.scandir(directory) as entries:
            return sorted((e for e in entries if e.is_dir()), key=lambda e: e.name)
    except OSError:
        return []


def walk_directories(root: DirectoryArg) -> list[str]:
    """List every directory below root, depth-first, each before its children.

    Entries are visited in name order. Symlinked directories are listed but
    not descended into. Missing or unreadable directories contribute nothing.
    The walk uses an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit.

    Args:
        root: Directory to walk (not itself included in the result)

    Returns:
        Directory paths, each ending in exactly one path separator
    """
    found: list[str] = []
    pending = _subdirectories(os.fspath(root))[::-1]
    while pending:
        entry = pending.pop()
        found.append(normalize_directory(entry.path))
        if not entry.is_symlink():
            pending.extend(_subdirectories(entry.path)[::-1])
    return found


class PackageLoader(BaseLoader):
    """Loader that expands each registered package root into its subtree."""

    def register_package_root(self, prefix: str, package_root: DirectoryArg) -> None:
        """Register a package root and every directory beneath it.

        Registering the same (prefix, root) pair again does nothing. The
        guard, the walk and the appends run under the registry lock, so
        concurrent registrations of one root cannot both pass the guard.
        """
        with self.registry.lock:
            if self.registry.has_directory(prefix, package_root):
                logger.debug(f"[loader:register] {prefix} -> {package_root} already registered, skipping")
                return

            # Root first so files directly under it are reachable
            self.registry.add(prefix, package_root)
            added = 0
            for directory in walk_directories(package_root):
                if self.registry.add(prefix, directory, unique=True):
                    added += 1
        if added:
            logger.debug(f"[loader:register] {prefix} -> {package_root} (+{added} subdirectories)")

    register_prefix = register_package_root

    def register_prefixes(self, prefixes: Mapping[str, DirectoryArg]) -> None:
        """Register several package roots (prefix -> package root)."""
        for prefix, package_root in prefixes.items():
            self.register_package_root(prefix, package_root)
