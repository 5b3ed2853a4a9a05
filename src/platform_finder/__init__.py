"""
Human-readable OS platform names.

This package reads Linux release files (/etc/os-release, /etc/lsb-release,
/etc/*-release and friends) and composes a descriptive platform name such as
"Ubuntu 9.10 (karmic)" next to the generic name/version/arch of the host.
"""

from .config import ConfigError, ConfigManager, ReleaseFile
from .finder import find_release_file, generic_identity, get_os_info
from .utils import (
    OsInfo,
    OsInfoDict,
    ReleaseFormat,
    parse_key_values,
    read_platform_name,
    read_platform_name_from_lsb,
    read_platform_name_from_os_release,
    read_platform_name_from_os_release_for_arch_linux,
    resolve,
)

__all__ = [
    "ConfigError",
    "ConfigManager",
    "OsInfo",
    "OsInfoDict",
    "ReleaseFile",
    "ReleaseFormat",
    "find_release_file",
    "generic_identity",
    "get_os_info",
    "parse_key_values",
    "read_platform_name",
    "read_platform_name_from_lsb",
    "read_platform_name_from_os_release",
    "read_platform_name_from_os_release_for_arch_linux",
    "resolve",
]
