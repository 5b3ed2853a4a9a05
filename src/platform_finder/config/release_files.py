from dataclasses import dataclass

from platform_finder.utils.types import ReleaseFormat


@dataclass(frozen=True)
class ReleaseFile:
    path: str
    format: ReleaseFormat


# Most specific first; paths may be glob patterns.
DEFAULT_RELEASE_FILES: tuple[ReleaseFile, ...] = (
    ReleaseFile("/etc/os-release", ReleaseFormat.OS_RELEASE),
    ReleaseFile("/usr/lib/os-release", ReleaseFormat.OS_RELEASE),
    ReleaseFile("/etc/lsb-release", ReleaseFormat.LSB_RELEASE),
    ReleaseFile("/etc/system-release", ReleaseFormat.GENERIC),
    ReleaseFile("/etc/*-release", ReleaseFormat.GENERIC),
    ReleaseFile("/etc/*_version", ReleaseFormat.GENERIC),
    ReleaseFile("/etc/issue", ReleaseFormat.GENERIC),
    ReleaseFile("/proc/version", ReleaseFormat.GENERIC),
)
