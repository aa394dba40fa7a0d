"""
Persist and reload application settings in the OS config directory.

Quick start::

    from prefstore import ConfigDescriptor, Format, Location

    descriptor = ConfigDescriptor("MyApp", Location.auto(), Format.JSON)
    descriptor.save({"window_width": 800, "window_height": 600})
    settings = descriptor.load()
    descriptor.delete()
"""

from prefstore.models import Format, Location, LocationKind
from prefstore.store import ConfigDescriptor
from prefstore.paths import host_app_name, resolve_path, user_config_dir
from prefstore.formats import deserialize, extension_for, serialize
from prefstore.errors import (
    ConfigIOError,
    FormatError,
    NotFoundError,
    PrefStoreError,
    ResolutionError,
)

__all__ = [
    "ConfigDescriptor",
    "ConfigIOError",
    "Format",
    "FormatError",
    "Location",
    "LocationKind",
    "NotFoundError",
    "PrefStoreError",
    "ResolutionError",
    "deserialize",
    "extension_for",
    "host_app_name",
    "resolve_path",
    "serialize",
    "user_config_dir",
]
