"""Host platform lookup.

Identifies the host with the `platform` module, then, on Linux, walks the
configured release files in order and resolves the first one present with
its parsing strategy. Other OS families report their generic name.

Lookups:
- `generic_identity()`: (name, version, arch) from the runtime.
- `iter_release_files(...)` / `find_release_file(...)`: existing candidates.
- `get_os_info(...)`: the full `OsInfo` for the host.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import Iterable, Iterator, Union

from platform_finder.config import ConfigManager, ReleaseFile
from platform_finder.utils.osinfo import resolve
from platform_finder.utils.types import OsInfo

logger = logging.getLogger(__name__)


def generic_identity() -> tuple[str, str, str]:
    """Return the runtime's generic (name, version, arch), e.g. ("Linux", "6.1.0", "x86_64")."""
    return platform.system(), platform.release(), platform.machine()


def _expand(entry: ReleaseFile, root: Path) -> list[Path]:
    relative = entry.path.lstrip("/")
    if any(c in relative for c in "*?["):
        return sorted(root.glob(relative))
    return [root / relative]


def iter_release_files(
    candidates: Iterable[ReleaseFile], root: Union[str, Path] = "/"
) -> Iterator[tuple[Path, ReleaseFile]]:
    """Yield (path, entry) for every candidate that exists as a regular file, in order."""
    root = Path(root)
    for entry in candidates:
        for path in _expand(entry, root):
            if path.is_file():
                yield path, entry


def find_release_file(
    candidates: Iterable[ReleaseFile], root: Union[str, Path] = "/"
) -> tuple[Path, ReleaseFile] | None:
    """Return the first existing release file, or None when there is none."""
    return next(iter_release_files(candidates, root), None)


def get_os_info(
    config: ConfigManager | None = None,
    *,
    name: str | None = None,
    version: str | None = None,
    arch: str | None = None,
) -> OsInfo:
    """Return the host's OsInfo.

    Args:
        config: Release file table and root; defaults to the built-in table.
        name: Generic OS name; taken from the runtime when None.
        version: Generic OS version; taken from the runtime when None.
        arch: Architecture; taken from the runtime when None.

    Raises:
        OSError: If a release file fails while being read. Files that exist
            but cannot be opened for lack of permission are skipped, as are
            files that yield nothing beyond the generic name.
    """
    if config is None:
        config = ConfigManager()
    runtime_name, runtime_version, runtime_arch = generic_identity()
    name = runtime_name if name is None else name
    version = runtime_version if version is None else version
    arch = runtime_arch if arch is None else arch

    if not name.lower().startswith("linux"):
        logger.debug("No release files for %s; using generic name", name)
        return OsInfo(name, version, arch, name)

    for path, entry in iter_release_files(config.release_files, config.root):
        try:
            f = open(path, "r", encoding="utf-8", errors="replace")
        except PermissionError as e:
            logger.warning("Skipping unreadable release file %s: %s", path, e)
            continue
        with f:
            logger.debug("Reading %s as %s", path, entry.format.value)
            info = resolve(entry.format, name, version, arch, f)
        if info.platform_name != name:
            return info
        logger.debug("Nothing usable in %s; trying next release file", path)

    logger.debug("No usable release file found under %s", config.root)
    return OsInfo(name, version, arch, name)
