"""Shared result contracts for platform lookups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class OsInfoDict(TypedDict):
    name: str
    version: str
    arch: str
    platform_name: str


@dataclass(frozen=True)
class OsInfo:
    """Generic host identity plus the derived platform name.

    `name`, `version` and `arch` are carried through exactly as given;
    only `platform_name` is computed from a release file.
    """

    name: str
    version: str
    arch: str
    platform_name: str

    def to_dict(self) -> OsInfoDict:
        return {
            "name": self.name,
            "version": self.version,
            "arch": self.arch,
            "platform_name": self.platform_name,
        }


class ReleaseFormat(str, Enum):
    """Layout of a release file, one per parsing strategy."""

    OS_RELEASE = "os-release"
    OS_RELEASE_ARCH = "os-release-arch"
    LSB_RELEASE = "lsb-release"
    GENERIC = "generic"
