#!/usr/bin/python3
import unittest
from pathlib import Path
from unittest.mock import patch
from tempfile import TemporaryDirectory

from prefstore.models import Format, Location
from prefstore.errors import ConfigIOError, ResolutionError
from prefstore.paths import host_app_name, resolve_path, system_app_dir, user_config_dir

class UserConfigDirTests(unittest.TestCase):
    def test_returns_path_reported_by_qt(self):
        with patch("prefstore.paths.QStandardPaths.writableLocation", return_value="/home/user/.config"):
            self.assertEqual(user_config_dir(), Path("/home/user/.config"))

    def test_returns_none_when_qt_reports_nothing(self):
        with patch("prefstore.paths.QStandardPaths.writableLocation", return_value=""):
            self.assertIsNone(user_config_dir())

class HostAppNameTests(unittest.TestCase):
    def test_prefers_qt_application_name(self):
        with patch("prefstore.paths.QCoreApplication.applicationName", return_value="WriteApp"):
            self.assertEqual(host_app_name(), "WriteApp")

    def test_falls_back_to_script_stem(self):
        with patch("prefstore.paths.QCoreApplication.applicationName", return_value=""), patch(
            "prefstore.paths.sys.argv", ["/opt/tools/editor.py"]
        ):
            self.assertEqual(host_app_name(), "editor")

    def test_falls_back_to_constant_without_argv(self):
        with patch("prefstore.paths.QCoreApplication.applicationName", return_value=""), patch(
            "prefstore.paths.sys.argv", []
        ):
            self.assertEqual(host_app_name(), "python")

class ResolvePathTests(unittest.TestCase):
    def setUp(self):
        self._tmp = TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_dir = Path(self._tmp.name)
        self.lookup = lambda: self.config_dir

    def test_auto_uses_app_subdirectory(self):
        path = resolve_path("demo", Location.auto(), Format.JSON, config_dir_lookup=self.lookup)
        self.assertEqual(path, self.config_dir.absolute() / "demo" / "config.json")

    def test_auto_is_deterministic(self):
        first = resolve_path("demo", Location.auto(), Format.YAML, config_dir_lookup=self.lookup)
        second = resolve_path("demo", Location.auto(), Format.YAML, config_dir_lookup=self.lookup)
        self.assertEqual(first, second)

    def test_auto_uses_qt_lookup_by_default(self):
        with patch("prefstore.paths.user_config_dir", return_value=self.config_dir):
            path = resolve_path("demo", Location.auto(), Format.TOML)
        self.assertEqual(path, self.config_dir.absolute() / "demo" / "config.toml")

    def test_explicit_dir_ignores_app_name(self):
        location = Location.explicit(self.config_dir / "custom")
        first = resolve_path("app-one", location, Format.INI, config_dir_lookup=self.lookup)
        second = resolve_path("app-two", location, Format.INI, config_dir_lookup=self.lookup)
        self.assertEqual(first, second)
        self.assertEqual(first, (self.config_dir / "custom" / "config.ini").absolute())

    def test_dir_does_not_need_system_directory(self):
        path = resolve_path("demo", Location.dir(self.config_dir), Format.JSON, config_dir_lookup=lambda: None)
        self.assertEqual(path.name, "config.json")

    def test_path_is_used_verbatim(self):
        target = self.config_dir / "settings.data"
        path = resolve_path("demo", Location.path(target), Format.PICKLE, config_dir_lookup=self.lookup)
        self.assertEqual(path, target.absolute())

    def test_file_uses_custom_name_in_app_directory(self):
        path = resolve_path("demo", Location.file("custom_file.yaml"), Format.YAML, config_dir_lookup=self.lookup)
        self.assertEqual(path, self.config_dir.absolute() / "demo" / "custom_file.yaml")

    def test_read_resolution_creates_nothing(self):
        resolve_path("demo", Location.auto(), Format.JSON, config_dir_lookup=self.lookup)
        self.assertFalse((self.config_dir / "demo").exists())

    def test_write_resolution_creates_parent_tree(self):
        location = Location.dir(self.config_dir / "a" / "b")
        path = resolve_path("demo", location, Format.JSON, create_dirs=True, config_dir_lookup=self.lookup)
        self.assertTrue(path.parent.is_dir())
        self.assertFalse(path.exists())

    def test_missing_system_directory_raises(self):
        with self.assertRaises(ResolutionError):
            resolve_path("demo", Location.auto(), Format.JSON, config_dir_lookup=lambda: None)
        with self.assertRaises(ResolutionError):
            resolve_path("demo", Location.file("x.json"), Format.JSON, config_dir_lookup=lambda: None)

    def test_empty_app_name_raises(self):
        with self.assertRaises(ResolutionError):
            resolve_path("", Location.auto(), Format.JSON, config_dir_lookup=self.lookup)

    def test_directory_creation_failure_raises_io_error(self):
        blocker = self.config_dir / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with self.assertRaises(ConfigIOError):
            resolve_path("demo", Location.dir(blocker / "nested"), Format.JSON, create_dirs=True)

    def test_system_app_dir(self):
        self.assertEqual(system_app_dir("demo", self.lookup), self.config_dir / "demo")

if __name__ == "__main__":
    unittest.main()
