"""
Resolves the on-disk location of an application's config file.
"""

from __future__ import annotations

import sys
import logging
from pathlib import Path
from typing import Callable, Optional
from prefstore.models import Format, Location, LocationKind
from prefstore.errors import ConfigIOError, ResolutionError
from prefstore.constants import FALLBACK_APP_NAME
from PyQt6.QtCore import QCoreApplication, QStandardPaths

logger = logging.getLogger(__name__)

ConfigDirLookup = Callable[[], Optional[Path]]

def user_config_dir() -> Optional[Path]:
    """
    Returns the per-user config directory of the host OS, or None when Qt cannot determine one.
    """
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericConfigLocation)
    if not location:
        return None
    return Path(location)

def host_app_name() -> str:
    """
    Returns the name of the running application.

    Prefers the Qt application name and falls back to the stem of the launched script.
    """
    name = QCoreApplication.applicationName()
    if name:
        return name
    script = Path(sys.argv[0]).stem if sys.argv and sys.argv[0] else ""
    return script or FALLBACK_APP_NAME

def _system_app_dir(app_name: str, config_dir_lookup: ConfigDirLookup) -> Path:
    if not app_name:
        raise ResolutionError("Application name is empty.")
    config_dir = config_dir_lookup()
    if config_dir is None:
        raise ResolutionError("No system config directory detected.")
    return Path(config_dir) / app_name

def resolve_path(
    app_name: str,
    location: Location,
    fmt: Format,
    *,
    create_dirs: bool = False,
    config_dir_lookup: Optional[ConfigDirLookup] = None,
) -> Path:
    """
    Computes the absolute path of the config file.

    When ``create_dirs`` is set the parent directory tree is created, which is what
    writes need; reads and deletes leave the file system untouched.
    """
    lookup = config_dir_lookup or user_config_dir

    if location.kind is LocationKind.AUTO:
        path = _system_app_dir(app_name, lookup) / fmt.default_file_name
    elif location.kind is LocationKind.FILE:
        path = _system_app_dir(app_name, lookup) / location.value
    elif location.kind is LocationKind.DIR:
        path = Path(location.value).expanduser() / fmt.default_file_name
    else:
        path = Path(location.value).expanduser()

    path = path.absolute()
    logger.debug("Resolved config path for %s (%s, %s): %s", app_name, location.kind.value, fmt.label, path)

    if create_dirs:
        ensure_parent_dir(path)
    return path

def ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Cannot create config directory %s: %s", path.parent, exc)
        raise ConfigIOError(f"Cannot create directory {path.parent}: {exc}") from exc

def system_app_dir(app_name: str, config_dir_lookup: Optional[ConfigDirLookup] = None) -> Path:
    """
    Returns ``<user_config_dir>/<app_name>`` without creating it.
    """
    return _system_app_dir(app_name, config_dir_lookup or user_config_dir)
