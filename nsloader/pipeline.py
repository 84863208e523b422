"""Host-side resolution pipeline.

Loaders depend only on the narrow ResolverPipeline interface. ResolverChain
is a standalone pipeline: an ordered resolver stack that hands the first
resolved path to a source loader, which performs the actual load.
"""

import importlib.util
import logging
from collections.abc import Callable
from types import ModuleType
from typing import Any
from typing import Protocol

logger = logging.getLogger(__name__)

ResolveFn = Callable[[str], str | None]
SourceLoader = Callable[[str, str], Any]


class ResolverPipeline(Protocol):
    """Interface a host exposes for resolver registration."""

    def add_resolver(self, resolver: ResolveFn, prepend: bool = False) -> None: ...

    def remove_resolver(self, resolver: ResolveFn) -> None: ...


def execute_source_file(name: str, path: str) -> ModuleType:
    """Execute a Python source file as a fresh module named name.

    Errors raised by the file itself propagate to the caller.
    """
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load source for '{name}' from {path}", name=name, path=path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class ResolverChain:
    """Ordered resolver stack with a pluggable source loader.

    Resolvers are consulted in order; the first one returning a path wins and
    the source loader is invoked with (name, path). Names already loaded are
    not resolved again.
    """

    def __init__(self, source_loader: SourceLoader = execute_source_file) -> None:
        self._resolvers: list[ResolveFn] = []
        self._source_loader = source_loader
        self.loaded: dict[str, str] = {}
        self.modules: dict[str, Any] = {}

    @property
    def resolvers(self) -> list[ResolveFn]:
        return list(self._resolvers)

    def add_resolver(self, resolver: ResolveFn, prepend: bool = False) -> None:
        """Add a resolver to the front or back of the stack.

        Adding a resolver that is already present does nothing.
        """
        if resolver in self._resolvers:
            return
        if prepend:
            self._resolvers.insert(0, resolver)
        else:
            self._resolvers.append(resolver)

    def remove_resolver(self, resolver: ResolveFn) -> None:
        """Remove a resolver (no-op when absent)."""
        if resolver in self._resolvers:
            self._resolvers.remove(resolver)

    def resolve(self, name: str) -> str | None:
        """Ask each resolver in order, without loading anything."""
        for resolver in self._resolvers:
            path = resolver(name)
            if path:
                return path
        return None

    def load(self, name: str) -> str | None:
        """Resolve name and pass the path to the source loader.

        Returns:
            The loaded path, or None if no resolver found the name
        """
        if name in self.loaded:
            return self.loaded[name]
        path = self.resolve(name)
        if path is None:
            return None
        self.modules[name] = self._source_loader(name, path)
        self.loaded[name] = path
        logger.debug(f"[pipeline:load] {name} -> {path}")
        return path
