"""Detection of operating systems."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from predefinfo.bsd import detect_bsd_bsdi, detect_bsd_dragonfly, detect_bsd_net
from predefinfo.detection import Defines, Detection
from predefinfo.make import make_10_vvrr
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    VERSION_NUMBER_NOT_AVAILABLE,
    version_number,
)

__all__ = [
    "detect_cygwin",
    "detect_haiku",
    "detect_hpux",
    "detect_ios",
    "detect_irix",
    "detect_linux",
    "detect_operating_systems",
    "detect_os400",
    "detect_qnx",
    "detect_svr4",
    "detect_unix",
]


def _marked(
    defines: Defines, symbol: str, description: str, markers: Iterable[str], gated: bool = False
) -> Detection:
    value = VERSION_NUMBER_NOT_AVAILABLE
    if not gated and defines.any_defined(*markers):
        value = VERSION_NUMBER_AVAILABLE
    return Detection(symbol, description, value)


def detect_unix(defines: Defines) -> Detection:
    """Unix environment; detected alongside any other operating system."""
    return _marked(
        defines,
        "BOOST_OS_UNIX",
        "Unix Environment",
        ("unix", "__unix", "_XOPEN_SOURCE", "_POSIX_SOURCE"),
    )


def detect_svr4(defines: Defines) -> Detection:
    """SVR4 environment; detected alongside any other operating system."""
    return _marked(
        defines,
        "BOOST_OS_SVR4",
        "SVR4 Environment",
        ("__sysv__", "__SVR4", "__svr4__", "_SYSTYPE_SVR4"),
    )


def detect_cygwin(defines: Defines, already_detected: bool) -> Detection:
    """Cygwin, versioned from the API major and minor numbers."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if not already_detected and defines.is_defined("__CYGWIN__"):
        value = version_number(
            defines.value("CYGWIN_VERSION_API_MAJOR", 0),
            defines.value("CYGWIN_VERSION_API_MINOR", 0),
            0,
        )
    return Detection("BOOST_OS_CYGWIN", "Cygwin", value)


def detect_haiku(defines: Defines, already_detected: bool) -> Detection:
    """Haiku."""
    return _marked(defines, "BOOST_OS_HAIKU", "Haiku", ("__HAIKU__",), already_detected)


def detect_hpux(defines: Defines, already_detected: bool) -> Detection:
    """HP-UX."""
    return _marked(
        defines, "BOOST_OS_HPUX", "HP-UX", ("hpux", "_hpux", "__hpux"), already_detected
    )


def detect_ios(defines: Defines, already_detected: bool) -> Detection:
    """iOS; the value is the minimum required OS version times 1000."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    required = "__ENVIRONMENT_IPHONE_OS_VERSION_MIN_REQUIRED__"
    if (
        not already_detected
        and defines.is_defined("__APPLE__")
        and defines.is_defined("__MACH__")
        and defines.is_defined(required)
    ):
        value = defines.value(required, 0) * 1000
    return Detection("BOOST_OS_IOS", "iOS", value)


def detect_irix(defines: Defines, already_detected: bool) -> Detection:
    """IRIX."""
    return _marked(defines, "BOOST_OS_IRIX", "IRIX", ("sgi", "__sgi"), already_detected)


def detect_linux(defines: Defines, already_detected: bool) -> Detection:
    """Linux."""
    return _marked(
        defines,
        "BOOST_OS_LINUX",
        "Linux",
        ("linux", "__linux", "__linux__", "__gnu_linux__"),
        already_detected,
    )


def detect_os400(defines: Defines, already_detected: bool) -> Detection:
    """IBM OS/400."""
    return _marked(defines, "BOOST_OS_OS400", "IBM OS/400", ("__OS400__",), already_detected)


def detect_qnx(defines: Defines, already_detected: bool) -> Detection:
    """QNX, versioned from ``_NTO_VERSION``; plain ``__QNX__`` means version 4."""
    symbol, description = "BOOST_OS_QNX", "QNX"
    if already_detected or not defines.any_defined("__QNX__", "__QNXNTO__"):
        return Detection(symbol, description)
    if defines.is_defined("_NTO_VERSION"):
        value = make_10_vvrr(defines.value("_NTO_VERSION", 0))
    elif defines.is_defined("__QNX__"):
        value = version_number(4, 0, 0)
    else:
        value = VERSION_NUMBER_AVAILABLE
    return Detection(symbol, description, value)


_GATED: tuple[Callable[[Defines, bool], Detection], ...] = (
    detect_bsd_bsdi,
    detect_bsd_dragonfly,
    detect_bsd_net,
    detect_cygwin,
    detect_haiku,
    detect_hpux,
    detect_ios,
    detect_irix,
    detect_linux,
    detect_os400,
    detect_qnx,
)


def detect_operating_systems(defines: Defines) -> list[Detection]:
    """All operating system detections in order.

    Only the first operating system found is detected; the Unix and SVR4
    environments are detected independently of it.
    """
    detections = []
    seen = False
    for detector in _GATED:
        detection = detector(defines, seen)
        detections.append(detection)
        seen = seen or detection.detected()
    detections.append(detect_unix(defines))
    detections.append(detect_svr4(defines))
    return detections