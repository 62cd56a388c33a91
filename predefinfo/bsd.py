"""Detection of the BSD operating system variants."""

from __future__ import annotations

from predefinfo.detection import Defines, Detection
from predefinfo.make import make_10_vrp000, make_10_vrr000, make_10_vvrr00pp00
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    VERSION_NUMBER_NOT_AVAILABLE,
    version_number,
)

__all__ = ["detect_bsd_bsdi", "detect_bsd_dragonfly", "detect_bsd_net"]


def detect_bsd_bsdi(defines: Defines, already_detected: bool) -> Detection:
    """BSDi BSD/OS; nothing is detected once another OS has been."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if not already_detected and defines.is_defined("__bsdi__"):
        value = VERSION_NUMBER_AVAILABLE
    return Detection("BOOST_OS_BSD_BSDI", "BSDi BSD/OS", value)


def detect_bsd_dragonfly(defines: Defines, already_detected: bool) -> Detection:
    """DragonFly BSD.

    The marker ``__DragonFly__`` only ever sets a differently named symbol,
    so this predef itself is never reported as detected.
    """
    return Detection(
        "BOOST_OS_BSD_DRAGONFLY", "DragonFly BSD", VERSION_NUMBER_NOT_AVAILABLE
    )


def _netbsd_upper(defines: Defines) -> int:
    if not defines.is_defined("__NETBSD_version"):
        return VERSION_NUMBER_AVAILABLE
    level = defines.value("__NETBSD_version", 0)
    return make_10_vrp000(level) if level < 500000 else make_10_vrr000(level)


def _netbsd_mixed(defines: Defines) -> int:
    releases = (
        ("NetBSD0_8", version_number(0, 8, 0)),
        ("NetBSD0_9", version_number(0, 9, 0)),
        ("NetBSD1_0", version_number(1, 0, 0)),
    )
    for name, version in releases:
        if defines.is_defined(name):
            return version
    if defines.is_defined("__NetBSD_Version"):
        return make_10_vvrr00pp00(defines.value("__NetBSD_Version", 0))
    return VERSION_NUMBER_AVAILABLE


def detect_bsd_net(defines: Defines, already_detected: bool) -> Detection:
    """NetBSD; ``__NETBSD__`` is consulted before ``__NetBSD__``."""
    symbol, description = "BOOST_OS_BSD_NET", "NetBSD"
    if already_detected:
        return Detection(symbol, description)
    if defines.is_defined("__NETBSD__"):
        return Detection(symbol, description, _netbsd_upper(defines))
    if defines.is_defined("__NetBSD__"):
        return Detection(symbol, description, _netbsd_mixed(defines))
    return Detection(symbol, description)