"""nsloader - resolve namespaced names to source files by registered prefix.

Register a few (prefix, directory) mappings at startup instead of listing
every source file.
"""

from .import_hook import MetaPathPipeline
from .import_hook import ResolverFinder
from .loaders import BaseLoader
from .loaders import ClassLoader
from .package_loader import PackageLoader
from .package_loader import walk_directories
from .pipeline import ResolverChain
from .pipeline import ResolverPipeline
from .registry import PrefixRegistry
from .registry import normalize_directory
from .registry import normalize_prefix
from .resolver import Resolver
from .settings import SettingsError
from .settings import activate_loaders
from .settings import build_loaders
from .settings import load_settings

__all__ = [
    "BaseLoader",
    "ClassLoader",
    "MetaPathPipeline",
    "PackageLoader",
    "PrefixRegistry",
    "Resolver",
    "ResolverChain",
    "ResolverFinder",
    "ResolverPipeline",
    "SettingsError",
    "activate_loaders",
    "build_loaders",
    "load_settings",
    "normalize_directory",
    "normalize_prefix",
    "walk_directories",
]
