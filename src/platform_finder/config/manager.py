"""Configuration loader for release-file lookup.

Reads an optional YAML file listing the release files to probe, in order,
and the filesystem root they are resolved against. Without a file the
built-in table is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml

from platform_finder.utils.types import ReleaseFormat

from .release_files import DEFAULT_RELEASE_FILES, ReleaseFile


class ConfigError(ValueError):
    """Raised when the YAML configuration structure is invalid."""


def validate_config_schema(data: Any) -> None:
    """Validate the high-level config schema.

    Checks:
    - release_files: non-empty list of objects with a string `path` and a
      known `format`
    - root: optional string

    Raises:
        ConfigError: on structural issues; the message names the offending entry.
    """
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML must be a mapping/object")

    root = data.get("root")
    if root is not None and not isinstance(root, str):
        raise ConfigError("'root' must be a string")

    entries = data.get("release_files")
    if not isinstance(entries, list) or not entries:
        raise ConfigError("'release_files' must be a non-empty list")

    formats = {f.value for f in ReleaseFormat}
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"release_files[{i}] must be an object")
        path = entry.get("path")
        if not isinstance(path, str) or not path:
            raise ConfigError(f"release_files[{i}].path must be a non-empty string")
        fmt = entry.get("format", ReleaseFormat.GENERIC.value)
        if fmt not in formats:
            raise ConfigError(
                f"release_files[{i}].format '{fmt}' is not one of: {', '.join(sorted(formats))}"
            )


class ConfigManager:
    """Manage the list of release files to probe.

    The YAML file is expected to contain a top-level "release_files" key with
    a list of objects, each defining "path" (a file or glob pattern) and
    optionally "format" (default "generic"). An optional "root" key prefixes
    every path, which lets the lookup run against a chroot or a test tree.

    Args:
        config_path: Path to the YAML configuration file, or None for defaults.
    """

    def __init__(self, config_path: Union[str, Path, None] = None):
        self.config_path = Path(config_path) if config_path is not None else None
        self.raw: dict[str, Any] = {}
        if self.config_path is None:
            self.root = Path("/")
            self.release_files = list(DEFAULT_RELEASE_FILES)
        else:
            self.raw = self._load_config()
            self.root = Path(self.raw.get("root") or "/")
            self.release_files = [
                ReleaseFile(entry["path"], ReleaseFormat(entry.get("format", ReleaseFormat.GENERIC.value)))
                for entry in self.raw["release_files"]
            ]

    def _load_config(self) -> dict[str, Any]:
        """Load and validate the YAML configuration file.

        Raises:
            ConfigError: If the YAML does not match the expected schema.
        """
        with open(self.config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        validate_config_schema(data)
        return data

    def list_paths(self) -> list[str]:
        """Return the configured release file paths in probe order."""
        return [entry.path for entry in self.release_files]
