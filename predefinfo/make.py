"""Decomposition of common vendor version number formats into packed versions.

In the names, ``0x`` marks hexadecimal digits and ``10`` decimal digits;
``V`` is a version digit, ``R`` a revision digit, ``P`` a patch digit and
``0`` an ignored digit.
"""

from __future__ import annotations

from predefinfo.version_number import version_number


def make_0x_vrp(v: int) -> int:
    return version_number((v & 0xF00) >> 8, (v & 0xF0) >> 4, v & 0xF)


def make_0x_vvrp(v: int) -> int:
    return version_number((v & 0xFF00) >> 8, (v & 0xF0) >> 4, v & 0xF)


def make_0x_vrpp(v: int) -> int:
    return version_number((v & 0xF000) >> 12, (v & 0xF00) >> 8, v & 0xFF)


def make_0x_vvrr(v: int) -> int:
    return version_number((v & 0xFF00) >> 8, v & 0xFF, 0)


def make_0x_vrrpppp(v: int) -> int:
    return version_number((v & 0xF000000) >> 24, (v & 0xFF0000) >> 16, v & 0xFFFF)


def make_0x_vvrrp(v: int) -> int:
    return version_number((v & 0xFF000) >> 12, (v & 0xFF0) >> 4, v & 0xF)


def make_0x_vrrpp000(v: int) -> int:
    return version_number(
        (v & 0xF0000000) >> 28, (v & 0xFF00000) >> 20, (v & 0xFF000) >> 12
    )


def make_0x_vvrrpp(v: int) -> int:
    return version_number((v & 0xFF0000) >> 16, (v & 0xFF00) >> 8, v & 0xFF)


def make_10_vppp(v: int) -> int:
    return version_number((v // 1000) % 10, 0, v % 1000)


def make_10_vvppp(v: int) -> int:
    return version_number((v // 1000) % 100, 0, v % 1000)


def make_10_vr0(v: int) -> int:
    return version_number((v // 100) % 10, (v // 10) % 10, 0)


def make_10_vrp(v: int) -> int:
    return version_number((v // 100) % 10, (v // 10) % 10, v % 10)


def make_10_vrp000(v: int) -> int:
    return version_number((v // 100000) % 10, (v // 10000) % 10, (v // 1000) % 10)


def make_10_vrpppp(v: int) -> int:
    return version_number((v // 100000) % 10, (v // 10000) % 10, v % 10000)


def make_10_vrpp(v: int) -> int:
    return version_number((v // 1000) % 10, (v // 100) % 10, v % 100)


def make_10_vrr(v: int) -> int:
    return version_number((v // 100) % 10, v % 100, 0)


def make_10_vrrpp(v: int) -> int:
    return version_number((v // 10000) % 10, (v // 100) % 100, v % 100)


def make_10_vrr000(v: int) -> int:
    return version_number((v // 100000) % 10, (v // 1000) % 100, 0)


def make_10_vv00(v: int) -> int:
    return version_number((v // 100) % 100, 0, 0)


def make_10_vvr_0ppppp(v: int, p: int) -> int:
    """Version from ``VVR`` plus a year-month patch level whose first digit is dropped."""
    return version_number((v // 10) % 100, v % 10, p % 100000)


def make_10_vvrr(v: int) -> int:
    return version_number((v // 100) % 100, v % 100, 0)


def make_10_vvrrp(v: int) -> int:
    return version_number((v // 1000) % 100, (v // 10) % 100, v % 10)


def make_10_vvrrpp(v: int) -> int:
    return version_number((v // 10000) % 100, (v // 100) % 100, v % 100)


def make_10_vvrrppp(v: int) -> int:
    return version_number((v // 100000) % 100, (v // 1000) % 100, v % 1000)


def make_10_vvrr0pp00(v: int) -> int:
    return version_number(
        (v // 10000000) % 100, (v // 100000) % 100, (v // 100) % 100
    )


def make_10_vvrr0pppp(v: int) -> int:
    return version_number((v // 10000000) % 100, (v // 100000) % 100, v % 10000)


def make_10_vvrr00pp00(v: int) -> int:
    return version_number(
        (v // 100000000) % 100, (v // 1000000) % 100, (v // 100) % 100
    )


def make_date(y: int, m: int, d: int) -> int:
    """Date as a version counted in years from 1970, then month and day."""
    return version_number(y % 10000 - 1970, m % 100, d % 100)


def make_yyyymmdd(v: int) -> int:
    return make_date((v // 10000) % 10000, (v // 100) % 100, v % 100)


def make_yyyy(v: int) -> int:
    """Year only; January 1st is used for month and day."""
    return make_date(v, 1, 1)


def make_yyyymm(v: int) -> int:
    """Year and month; the 1st is used for the day."""
    return make_date(v // 100, v % 100, 1)