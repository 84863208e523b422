"""Loader objects that own a prefix registry and plug into a host pipeline.

- BaseLoader: registry, resolver, and activate/deactivate against a pipeline
- ClassLoader: simple flavor, one or more base directories per prefix
"""

import logging
import os
from collections.abc import Iterable
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .registry import DEFAULT_SEPARATOR
from .registry import PrefixRegistry
from .resolver import DEFAULT_EXTENSION
from .resolver import Resolver

if TYPE_CHECKING:
    from .pipeline import ResolverPipeline

logger = logging.getLogger(__name__)

DirectoryArg = str | os.PathLike[str]


class BaseLoader:
    """Shared state and host wiring for both loader flavors."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR, extension: str = DEFAULT_EXTENSION):
        self.registry = PrefixRegistry(separator)
        self.resolver = Resolver(self.registry, extension)
        self._pipeline: "ResolverPipeline | None" = None

    @property
    def separator(self) -> str:
        return self.registry.separator

    @property
    def extension(self) -> str:
        return self.resolver.extension

    @property
    def active(self) -> bool:
        return self._pipeline is not None

    def resolve(self, name: str) -> str | None:
        """Resolve a symbolic name to a source file path, or None."""
        return self.resolver.resolve(name)

    def activate(self, pipeline: "ResolverPipeline", prepend: bool = False) -> None:
        """Subscribe this loader's resolve function to a host pipeline.

        Args:
            pipeline: Host pipeline exposing add_resolver/remove_resolver
            prepend: Insert ahead of already-registered resolvers
        """
        if self._pipeline is not None:
            logger.debug(f"{self!r} already active, skipping activation")
            return
        pipeline.add_resolver(self.resolve, prepend=prepend)
        self._pipeline = pipeline
        logger.debug(f"[loader:activate] {self!r} (prepend={prepend})")

    def deactivate(self) -> None:
        """Unsubscribe from the pipeline this loader was activated on."""
        if self._pipeline is None:
            return
        self._pipeline.remove_resolver(self.resolve)
        self._pipeline = None
        logger.debug(f"[loader:deactivate] {self!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(separator={self.separator!r}, prefixes={len(self.registry)})"


class ClassLoader(BaseLoader):
    """Loader with explicitly listed base directories per prefix.

    Repeated registration of the same (prefix, directory) pair stores a
    duplicate probe entry; it is harmless and not an error.
    """

    def register_prefix(self, prefix: str, base_dir: DirectoryArg) -> None:
        self.registry.add(prefix, base_dir)

    def register_prefixes(self, prefixes: Mapping[str, DirectoryArg | Iterable[DirectoryArg]]) -> None:
        """Register several prefixes at once.

        Args:
            prefixes: Prefix -> base directory, or prefix -> list of base directories
        """
        for prefix, base_dirs in prefixes.items():
            if isinstance(base_dirs, str | os.PathLike):
                base_dirs = [base_dirs]
            for base_dir in base_dirs:
                self.register_prefix(prefix, base_dir)
