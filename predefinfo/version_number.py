"""Packed version numbers: major (0-99), minor (0-99) and patch (0-99999) in one integer."""

from __future__ import annotations

__all__ = [
    "PREDEF_VERSION",
    "VERSION_NUMBER_AVAILABLE",
    "VERSION_NUMBER_MAX",
    "VERSION_NUMBER_MIN",
    "VERSION_NUMBER_NOT_AVAILABLE",
    "VERSION_NUMBER_ZERO",
    "format_version",
    "version_major",
    "version_minor",
    "version_number",
    "version_patch",
]


def _c_rem(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend, as integer arithmetic in C does."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _c_div(a: int, b: int) -> int:
    """Division that truncates toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def version_number(major: int, minor: int, patch: int) -> int:
    """Pack a version triplet; parts over their range are truncated (modulo)."""
    return (
        _c_rem(major, 100) * 10_000_000
        + _c_rem(minor, 100) * 100_000
        + _c_rem(patch, 100_000)
    )


def version_major(n: int) -> int:
    """Major part of a packed version number."""
    return _c_rem(_c_div(n, 10_000_000), 100)


def version_minor(n: int) -> int:
    """Minor part of a packed version number."""
    return _c_rem(_c_div(n, 100_000), 100)


def version_patch(n: int) -> int:
    """Patch part of a packed version number."""
    return _c_rem(n, 100_000)


def format_version(n: int) -> str:
    """Render a packed version number as ``major.minor.patch``."""
    return f"{version_major(n)}.{version_minor(n)}.{version_patch(n)}"


VERSION_NUMBER_MAX = version_number(99, 99, 99999)
VERSION_NUMBER_ZERO = version_number(0, 0, 0)
VERSION_NUMBER_MIN = version_number(0, 0, 1)
VERSION_NUMBER_AVAILABLE = VERSION_NUMBER_MIN
VERSION_NUMBER_NOT_AVAILABLE = VERSION_NUMBER_ZERO

PREDEF_VERSION = version_number(1, 15, 1)