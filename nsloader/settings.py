r"""Settings file loading and loader construction.

Settings format:
```yaml
separator: "\\"
extension: .py
prefixes:
  Acme\Util: [lib/util, vendor/util]
packages:
  Acme\Core: src/core
prepend: false   # true: activate_loaders puts these loaders ahead of existing resolvers
```

Relative directories are resolved against the settings file's directory.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from .loaders import BaseLoader
from .loaders import ClassLoader
from .package_loader import PackageLoader
from .schema import LoaderSettings

if TYPE_CHECKING:
    from .pipeline import ResolverPipeline

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "nsloader.yaml"


class SettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def get_settings_path(path: str | Path | None = None) -> Path:
    """Get the settings file path.

    Order: explicit argument, NSLOADER_CONFIG environment variable,
    then ./nsloader.yaml.
    """
    if path is not None:
        return Path(path)
    if env_path := os.getenv("NSLOADER_CONFIG"):
        return Path(env_path)
    return Path(DEFAULT_SETTINGS_FILE)


def load_settings(path: str | Path | None = None) -> LoaderSettings:
    """Load and validate a settings file.

    Raises:
        SettingsError: File missing, unparseable, or failing validation
    """
    settings_path = get_settings_path(path)
    try:
        with open(settings_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError(settings_path, f"cannot read settings ({e.strerror or e})") from e
    except yaml.YAMLError as e:
        raise SettingsError(settings_path, f"invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(settings_path, f"expected a mapping at top level, got {type(data).__name__}")

    try:
        settings = LoaderSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(settings_path, f"invalid settings:\n{e}") from e

    logger.debug(
        f"Loaded settings from {settings_path}: {len(settings.prefixes)} prefixes, {len(settings.packages)} packages"
    )
    return _resolve_relative_dirs(settings, settings_path.parent)


def _resolve_relative_dirs(settings: LoaderSettings, base: Path) -> LoaderSettings:
    """Anchor relative directories at the settings file's directory."""

    def anchor(directory: str) -> str:
        expanded = Path(directory).expanduser()
        return str(expanded if expanded.is_absolute() else base / expanded)

    return settings.model_copy(
        update={
            "prefixes": {prefix: [anchor(d) for d in dirs] for prefix, dirs in settings.prefix_directories().items()},
            "packages": {prefix: anchor(root) for prefix, root in settings.packages.items()},
        }
    )


def build_loaders(settings: LoaderSettings) -> list[BaseLoader]:
    """Create and populate loaders for the configured prefixes.

    The simple loader comes first when both sections are present.

    Returns:
        Loaders in activation order (empty sections produce no loader)
    """
    loaders: list[BaseLoader] = []
    if settings.prefixes:
        class_loader = ClassLoader(settings.separator, settings.extension)
        class_loader.register_prefixes(settings.prefix_directories())
        loaders.append(class_loader)
    if settings.packages:
        package_loader = PackageLoader(settings.separator, settings.extension)
        package_loader.register_prefixes(settings.packages)
        loaders.append(package_loader)
    return loaders


def activate_loaders(loaders: list[BaseLoader], pipeline: "ResolverPipeline", settings: LoaderSettings) -> None:
    """Activate loaders on a pipeline, honoring settings.prepend.

    Loaders keep their list order relative to each other; with prepend they
    go ahead of resolvers already on the pipeline.
    """
    ordered = reversed(loaders) if settings.prepend else loaders
    for loader in ordered:
        loader.activate(pipeline, prepend=settings.prepend)
