"""
Core value objects describing where and how a config file is stored.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional
from dataclasses import dataclass
from prefstore.constants import CONFIG_FILE_STEM

class Format(Enum):
    """
    Enumeration of supported storage formats.
    """

    JSON = ("json", "JSON")
    YAML = ("yaml", "YAML")
    TOML = ("toml", "TOML")
    INI = ("ini", "INI")
    PICKLE = ("pickle", "Pickle")

    def __init__(self, extension: str, label: str):
        self.extension = extension
        self.label = label

    @property
    def default_file_name(self) -> str:
        return f"{CONFIG_FILE_STEM}.{self.extension}"

    @classmethod
    def from_extension(cls, extension: str) -> "Format":
        normalized = extension.lower().lstrip(".")
        if normalized == "yml":
            return cls.YAML
        for fmt in cls:
            if fmt.extension == normalized:
                return fmt
        raise ValueError(f"Unknown config format extension: {extension!r}")

class LocationKind(Enum):
    AUTO = "auto"
    DIR = "dir"
    PATH = "path"
    FILE = "file"

@dataclass(frozen=True)
class Location:
    """
    Rule for deriving the config file path.

    AUTO uses the OS config directory plus the app name, DIR uses a caller
    supplied directory verbatim, PATH is the full file path and FILE is a
    custom file name inside the automatic app directory.
    """

    kind: LocationKind = LocationKind.AUTO
    value: Optional[str] = None

    def __post_init__(self):
        if self.kind is LocationKind.AUTO:
            if self.value is not None:
                raise ValueError("Auto location takes no value.")
        elif not self.value:
            raise ValueError(f"{self.kind.value} location requires a non-empty value.")

    @classmethod
    def auto(cls) -> "Location":
        return cls()

    @classmethod
    def dir(cls, directory: str | Path) -> "Location":
        return cls(LocationKind.DIR, str(directory))

    @classmethod
    def explicit(cls, directory: str | Path) -> "Location":
        """Alias of ``Location.dir``: the app name is not appended."""
        return cls.dir(directory)

    @classmethod
    def path(cls, file_path: str | Path) -> "Location":
        return cls(LocationKind.PATH, str(file_path))

    @classmethod
    def file(cls, file_name: str) -> "Location":
        return cls(LocationKind.FILE, file_name)

    @property
    def uses_system_dir(self) -> bool:
        return self.kind in (LocationKind.AUTO, LocationKind.FILE)
