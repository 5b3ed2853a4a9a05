"""OS release file parsing.

Strategies that turn the content of a release file into a human-readable
platform name. Each strategy takes the generic name/version/arch of the host
and a line source (any iterable of text lines, such as an open file) and
returns an `OsInfo`. Sources are always read to the end, even when the first
line already decides the result.

Strategies never fail on odd content: missing keys fall back to the best
available subset, and ultimately to the generic name. Errors raised while
iterating the source propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from .types import OsInfo, ReleaseFormat

logger = logging.getLogger(__name__)

LineSource = Iterable[str]
Strategy = Callable[[str, str, str, LineSource], OsInfo]

_PRETTY_NAME_PREFIX = "PRETTY_NAME="


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def _unquote(value: str) -> str:
    # Remove one pair of surrounding quotes
    if len(value) >= 2 and ((value[0] == value[-1] == '"') or (value[0] == value[-1] == "'")):
        return value[1:-1]
    return value


def _with_qualifier(description: str | None, qualifier: str | None) -> str | None:
    """Return "description (qualifier)", or whichever half is present."""
    if description and qualifier:
        return f"{description} ({qualifier})"
    return description or qualifier


def parse_key_values(lines: LineSource) -> dict[str, str]:
    """Parse KEY=VALUE lines into a dict.

    Splits on the first "=" only, so values may contain "=". Surrounding
    quotes are stripped from values and a repeated key keeps its last value.
    Blank lines, comments and lines without "=" are skipped. Empty values are
    dropped so that callers can treat them as missing.
    """
    fields: dict[str, str] = {}
    for raw in lines:
        line = _strip_eol(raw).strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = _unquote(value.strip())
        if value:
            fields[key.strip()] = value
        else:
            fields.pop(key.strip(), None)
    return fields


def read_platform_name(name: str, version: str, arch: str, lines: LineSource) -> OsInfo:
    """Read a free-text release file such as /etc/redhat-release.

    The first line is the platform name; later lines are read but ignored.
    An empty source (or a blank first line) yields the generic name.

    The exception is os-release-style content reached through this path
    (a generic /etc/*-release glob matching /etc/os-release, say): a
    PRETTY_NAME= line anywhere in the file takes precedence over the first
    line. Free-text files never carry such a line.
    """
    first_line: str | None = None
    pretty_name: str | None = None
    for raw in lines:
        line = _strip_eol(raw)
        if first_line is None:
            first_line = line
        if pretty_name is None and line.startswith(_PRETTY_NAME_PREFIX):
            pretty_name = _unquote(line[len(_PRETTY_NAME_PREFIX):].strip()) or None

    if first_line is not None and not first_line.strip():
        first_line = None
    return OsInfo(name, version, arch, pretty_name or first_line or name)


def read_platform_name_from_os_release(name: str, version: str, arch: str, lines: LineSource) -> OsInfo:
    """Read a freedesktop.org os-release file.

    PRETTY_NAME describes the platform, falling back to "NAME VERSION" and
    then NAME. When ID is set it is appended in parentheses:

        PRETTY_NAME="Ubuntu 14.04.3 LTS", ID=ubuntu -> "Ubuntu 14.04.3 LTS (ubuntu)"
        NAME=Fedora, PRETTY_NAME="Fedora 17 (Beefy Miracle)" -> "Fedora 17 (Beefy Miracle)"
    """
    fields = parse_key_values(lines)
    description = fields.get("PRETTY_NAME")
    if not description and "NAME" in fields:
        description = fields["NAME"]
        if "VERSION" in fields:
            description = f"{description} {fields['VERSION']}"
    platform_name = _with_qualifier(description, fields.get("ID"))
    return OsInfo(name, version, arch, platform_name or name)


def read_platform_name_from_os_release_for_arch_linux(
    name: str, version: str, arch: str, lines: LineSource
) -> OsInfo:
    """Read an os-release file filled with lsb-style DISTRIB_* keys, as Arch Linux ships it."""
    fields = parse_key_values(lines)
    platform_name = _with_qualifier(fields.get("DISTRIB_DESCRIPTION"), fields.get("DISTRIB_ID"))
    return OsInfo(name, version, arch, platform_name or name)


def read_platform_name_from_lsb(name: str, version: str, arch: str, lines: LineSource) -> OsInfo:
    """Read an /etc/lsb-release file.

    Composes "DISTRIB_DESCRIPTION (DISTRIB_CODENAME)". Without a description,
    "DISTRIB_ID DISTRIB_RELEASE" stands in for it.
    """
    fields = parse_key_values(lines)
    description = fields.get("DISTRIB_DESCRIPTION")
    if not description:
        description = " ".join(fields[k] for k in ("DISTRIB_ID", "DISTRIB_RELEASE") if k in fields) or None
    platform_name = _with_qualifier(description, fields.get("DISTRIB_CODENAME"))
    return OsInfo(name, version, arch, platform_name or name)


STRATEGIES: dict[ReleaseFormat, Strategy] = {
    ReleaseFormat.OS_RELEASE: read_platform_name_from_os_release,
    ReleaseFormat.OS_RELEASE_ARCH: read_platform_name_from_os_release_for_arch_linux,
    ReleaseFormat.LSB_RELEASE: read_platform_name_from_lsb,
    ReleaseFormat.GENERIC: read_platform_name,
}


def select_os_release_format(fields: dict[str, str]) -> ReleaseFormat:
    """Pick the strategy for parsed os-release content.

    Standard keys win; content made only of DISTRIB_* keys goes to the Arch
    Linux variant.
    """
    if any(k in fields for k in ("PRETTY_NAME", "NAME", "ID")):
        return ReleaseFormat.OS_RELEASE
    if any(k.startswith("DISTRIB_") for k in fields):
        return ReleaseFormat.OS_RELEASE_ARCH
    return ReleaseFormat.OS_RELEASE


def resolve(
    fmt: ReleaseFormat | str, name: str, version: str, arch: str, lines: LineSource
) -> OsInfo:
    """Run the strategy registered for `fmt` over `lines`.

    os-release content is buffered first so its keys can decide between the
    standard and the Arch Linux strategy.
    """
    fmt = ReleaseFormat(fmt)
    if fmt is ReleaseFormat.OS_RELEASE:
        lines = list(lines)
        fmt = select_os_release_format(parse_key_values(lines))
    logger.debug("Resolving platform name with %s strategy", fmt.value)
    return STRATEGIES[fmt](name, version, arch, lines)
