"""Python import system as a resolution pipeline.

MetaPathPipeline installs each resolver on sys.meta_path through a
ResolverFinder. A dotted module name is handed to the resolver as-is; when it
resolves, the file is imported as a module. When "<name>.__init__" resolves
instead, the name is imported as a package so that its children can be
found by the same resolver.
"""

import importlib.util
import logging
import os
import sys
from importlib.abc import MetaPathFinder
from importlib.machinery import ModuleSpec

from .pipeline import ResolveFn

logger = logging.getLogger(__name__)

PACKAGE_INIT = "__init__"


class ResolverFinder(MetaPathFinder):
    """Meta path finder backed by a resolve function."""

    def __init__(self, resolver: ResolveFn, separator: str = "."):
        self.resolver = resolver
        self.separator = separator

    def find_spec(self, fullname, path=None, target=None) -> ModuleSpec | None:
        location = self.resolver(fullname)
        if location:
            return importlib.util.spec_from_file_location(fullname, location)

        location = self.resolver(f"{fullname}{self.separator}{PACKAGE_INIT}")
        if location:
            return importlib.util.spec_from_file_location(
                fullname, location, submodule_search_locations=[os.path.dirname(location)]
            )
        return None

    def __repr__(self) -> str:
        return f"ResolverFinder({self.resolver!r})"


class MetaPathPipeline:
    """ResolverPipeline backed by sys.meta_path.

    Args:
        meta_path: Finder list to manage (defaults to sys.meta_path)
        separator: Namespace separator used to build package names
    """

    def __init__(self, meta_path: list | None = None, separator: str = "."):
        self.meta_path = sys.meta_path if meta_path is None else meta_path
        self.separator = separator

    def _find(self, resolver: ResolveFn) -> ResolverFinder | None:
        for finder in self.meta_path:
            if isinstance(finder, ResolverFinder) and finder.resolver == resolver:
                return finder
        return None

    def add_resolver(self, resolver: ResolveFn, prepend: bool = False) -> None:
        if self._find(resolver) is not None:
            return
        finder = ResolverFinder(resolver, self.separator)
        if prepend:
            self.meta_path.insert(0, finder)
        else:
            self.meta_path.append(finder)
        logger.debug(f"[import_hook:add] {finder!r} (prepend={prepend})")

    def remove_resolver(self, resolver: ResolveFn) -> None:
        finder = self._find(resolver)
        if finder is not None:
            self.meta_path.remove(finder)
            logger.debug(f"[import_hook:remove] {finder!r}")
