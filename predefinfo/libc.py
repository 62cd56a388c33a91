"""Detection of the C standard library."""

from __future__ import annotations

from predefinfo.detection import Defines, Detection
from predefinfo.make import make_10_vvrr0pp00
from predefinfo.version_number import VERSION_NUMBER_NOT_AVAILABLE, version_number

__all__ = ["detect_lib_c_gnu", "detect_lib_c_vms"]


def detect_lib_c_gnu(defines: Defines) -> Detection:
    """GNU glibc, versioned as major and minor."""
    if defines.is_defined("__GLIBC__"):
        value = version_number(
            defines.value("__GLIBC__", 0), defines.value("__GLIBC_MINOR__", 0), 0
        )
    elif defines.is_defined("__GNU_LIBRARY__"):
        value = version_number(
            defines.value("__GNU_LIBRARY__", 0),
            defines.value("__GNU_LIBRARY_MINOR__", 0),
            0,
        )
    else:
        value = VERSION_NUMBER_NOT_AVAILABLE
    return Detection("BOOST_LIB_C_GNU", "GNU", value)


def detect_lib_c_vms(defines: Defines) -> Detection:
    """VMS libc, versioned from ``__CRTL_VER``."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.is_defined("__CRTL_VER"):
        value = make_10_vvrr0pp00(defines.value("__CRTL_VER", 0))
    return Detection("BOOST_LIB_C_VMS", "VMS", value)