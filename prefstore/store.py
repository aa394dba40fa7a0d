"""
Loads, saves and deletes an application's config file.
"""

from __future__ import annotations

import logging
import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, get_type_hints
from dataclasses import dataclass, field
from collections.abc import Mapping
from prefstore.formats import deserialize, serialize
from prefstore.models import Format, Location
from prefstore.errors import ConfigIOError, FormatError, NotFoundError
from prefstore.paths import ConfigDirLookup, host_app_name, resolve_path

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}

def to_plain(value: Any) -> Any:
    """
    Converts a settings object into a structure the format libraries understand.

    Objects exposing ``to_dict`` and dataclass instances are turned into dicts,
    dataclass fields recursively; anything else is handed over untouched.
    """
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {item.name: to_plain(getattr(value, item.name)) for item in dataclasses.fields(value)}
    return value

def _coerce(value: Any, annotation: Any) -> Any:
    # ini hands every value back as a string
    if not isinstance(value, str):
        return value
    if annotation is bool:
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return value
    if annotation in (int, float):
        try:
            return annotation(value)
        except ValueError:
            return value
    return value

def _rebuildable(annotation: Any) -> bool:
    if not isinstance(annotation, type):
        return False
    return dataclasses.is_dataclass(annotation) or callable(getattr(annotation, "from_dict", None))

def from_plain(data: Any, cls: Optional[Type[T]]) -> Any:
    """
    Rebuilds a settings object of type ``cls`` from a decoded structure.

    Dataclass fields typed as dataclasses or ``from_dict`` classes are rebuilt
    recursively. Raises ``TypeError`` when the data does not fit ``cls``.
    """
    if cls is None:
        return data
    from_dict = getattr(cls, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if dataclasses.is_dataclass(cls):
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a mapping for {cls.__name__}, got {type(data).__name__}")
        hints = get_type_hints(cls)
        kwargs: Dict[str, Any] = {}
        for item in dataclasses.fields(cls):
            if item.init and item.name in data:
                value = data[item.name]
                hint = hints.get(item.name)
                kwargs[item.name] = from_plain(value, hint) if _rebuildable(hint) else _coerce(value, hint)
        return cls(**kwargs)
    return data

@dataclass(frozen=True)
class ConfigDescriptor:
    """
    Identifies one logical config file: the app it belongs to, where it lives and how it is encoded.

    The descriptor holds no open files and caches nothing; every call resolves the
    path again and goes to the file system.
    """

    app_name: str
    location: Location = field(default_factory=Location.auto)
    format: Format = Format.JSON
    config_dir_lookup: Optional[ConfigDirLookup] = field(default=None, compare=False, repr=False)

    @classmethod
    def for_host(cls, location: Optional[Location] = None, fmt: Format = Format.JSON) -> "ConfigDescriptor":
        """
        Builds a descriptor named after the running application.
        """
        return cls(app_name=host_app_name(), location=location or Location.auto(), format=fmt)

    def path(self, *, create_dirs: bool = False) -> Path:
        return resolve_path(
            self.app_name,
            self.location,
            self.format,
            create_dirs=create_dirs,
            config_dir_lookup=self.config_dir_lookup,
        )

    def exists(self) -> bool:
        return self.path().is_file()

    def load(self, cls: Optional[Type[T]] = None) -> Any:
        """
        Reads the config file and returns its content, rebuilt as ``cls`` when given.
        """
        path = self.path()
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc
        except OSError as exc:
            logger.error("Reading config file %s failed: %s", path, exc)
            raise ConfigIOError(f"Cannot read {path}: {exc}") from exc

        logger.debug("Loaded %d bytes from %s", len(data), path)
        plain = deserialize(self.format, data)
        try:
            return from_plain(plain, cls)
        except (TypeError, ValueError, KeyError, AttributeError) as exc:
            logger.warning("Config file %s does not match %s: %s", path, getattr(cls, "__name__", cls), exc)
            raise FormatError(self.format.label, f"cannot build {getattr(cls, '__name__', cls)}: {exc}") from exc

    def save(self, value: Any) -> Path:
        """
        Writes ``value`` to the config file, replacing any previous content.

        Returns the path that was written.
        """
        payload = serialize(self.format, to_plain(value))
        path = self.path(create_dirs=True)
        try:
            path.write_bytes(payload)
        except OSError as exc:
            logger.error("Writing config file %s failed: %s", path, exc)
            raise ConfigIOError(f"Cannot write {path}: {exc}") from exc

        logger.debug("Saved %d bytes to %s", len(payload), path)
        return path

    def delete(self) -> None:
        """
        Removes the config file. Deleting a missing file is not an error.

        For locations inside the system config directory the app directory is
        removed as well once it is empty. Directories given through ``Dir`` or
        ``Path`` locations belong to the caller and are never removed.
        """
        path = self.path()
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Config file %s already absent", path)
            return
        except OSError as exc:
            logger.error("Deleting config file %s failed: %s", path, exc)
            raise ConfigIOError(f"Cannot delete {path}: {exc}") from exc

        logger.debug("Deleted %s", path)
        if self.location.uses_system_dir:
            self._remove_empty_app_dir(path.parent)

    @staticmethod
    def _remove_empty_app_dir(directory: Path) -> None:
        if not directory.is_dir() or any(directory.iterdir()):
            return
        try:
            directory.rmdir()
        except OSError as exc:
            # another process may have written to it meanwhile
            logger.debug("Keeping config directory %s: %s", directory, exc)
        else:
            logger.debug("Removed empty config directory %s", directory)
