"""Utility helpers for platform lookups.

This package groups small, focused helpers:
- osinfo: parsing strategies for os-release, lsb-release and free-text release files
- types: shared result contracts
"""

from .osinfo import (
    parse_key_values,
    read_platform_name,
    read_platform_name_from_lsb,
    read_platform_name_from_os_release,
    read_platform_name_from_os_release_for_arch_linux,
    resolve,
)
from .types import OsInfo, OsInfoDict, ReleaseFormat

__all__ = [
    "OsInfo",
    "OsInfoDict",
    "ReleaseFormat",
    "parse_key_values",
    "read_platform_name",
    "read_platform_name_from_os_release",
    "read_platform_name_from_os_release_for_arch_linux",
    "read_platform_name_from_lsb",
    "resolve",
]
