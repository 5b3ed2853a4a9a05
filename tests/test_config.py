import os
import tempfile
from pathlib import Path
from unittest import TestCase

from platform_finder.config import (
    DEFAULT_RELEASE_FILES,
    ConfigError,
    ConfigManager,
    ReleaseFile,
    validate_config_schema,
)
from platform_finder.utils.types import ReleaseFormat

CONFIG = """
root: /srv/chroot
release_files:
  - path: /etc/os-release
    format: os-release
  - path: /etc/lsb-release
    format: lsb-release
  - path: /etc/*-release
"""


class test_ConfigManager(TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text):
        path = self.dir / "platform.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_defaults(self):
        config = ConfigManager()
        self.assertEqual(config.root, Path("/"))
        self.assertEqual(config.release_files, list(DEFAULT_RELEASE_FILES))
        self.assertEqual(config.list_paths()[:3], ["/etc/os-release", "/usr/lib/os-release", "/etc/lsb-release"])

    def test_load_yaml(self):
        config = ConfigManager(self._write(CONFIG))
        self.assertEqual(config.root, Path("/srv/chroot"))
        self.assertEqual(
            config.release_files,
            [
                ReleaseFile("/etc/os-release", ReleaseFormat.OS_RELEASE),
                ReleaseFile("/etc/lsb-release", ReleaseFormat.LSB_RELEASE),
                ReleaseFile("/etc/*-release", ReleaseFormat.GENERIC),
            ],
        )

    def test_invalid_yaml_raises_config_error(self):
        with self.assertRaises(ConfigError):
            ConfigManager(self._write("root: /\n"))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(os.path.join(self._tmp.name, "absent.yaml"))


class test_validate_config_schema(TestCase):
    def test_errors(self):
        bad = [
            None,
            ["release_files"],
            {"release_files": []},
            {"release_files": ["/etc/issue"]},
            {"release_files": [{"format": "generic"}]},
            {"release_files": [{"path": "/etc/issue", "format": "plist"}]},
            {"root": 5, "release_files": [{"path": "/etc/issue"}]},
        ]
        for data in bad:
            with self.assertRaises(ConfigError, msg=repr(data)):
                validate_config_schema(data)

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))

    def test_valid(self):
        validate_config_schema({"release_files": [{"path": "/etc/issue", "format": "generic"}]})
