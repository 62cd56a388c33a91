"""Detection of the C++ standard library."""

from __future__ import annotations

from predefinfo.detection import Defines, Detection
from predefinfo.make import (
    make_0x_vrpp,
    make_0x_vvrrp,
    make_0x_vvrrpp,
    make_10_vvppp,
    make_yyyymmdd,
)
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    VERSION_NUMBER_NOT_AVAILABLE,
    version_number,
)

__all__ = [
    "detect_lib_std_como",
    "detect_lib_std_cxx",
    "detect_lib_std_gnu",
    "detect_lib_std_ibm",
    "detect_lib_std_msl",
    "detect_lib_std_rw",
    "detect_libraries",
]


def detect_lib_std_cxx(defines: Defines) -> Detection:
    """libc++, versioned from ``_LIBCPP_VERSION`` as V.0.P."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.is_defined("_LIBCPP_VERSION"):
        value = make_10_vvppp(defines.value("_LIBCPP_VERSION", 0))
    return Detection("BOOST_LIB_STD_CXX", "libc++", value)


def detect_lib_std_como(defines: Defines) -> Detection:
    """Comeau Computing library, versioned as major only."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.is_defined("__LIBCOMO__"):
        value = version_number(defines.value("__LIBCOMO_VERSION__", 0), 0, 0)
    return Detection("BOOST_LIB_STD_COMO", "Comeau Computing", value)


def detect_lib_std_msl(defines: Defines) -> Detection:
    """Metrowerks library; ``__MSL_CPP__`` takes precedence over ``__MSL__``."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.is_defined("__MSL_CPP__"):
        value = make_0x_vrpp(defines.value("__MSL_CPP__", 0))
    elif defines.is_defined("__MSL__"):
        value = make_0x_vrpp(defines.value("__MSL__", 0))
    return Detection("BOOST_LIB_STD_MSL", "Metrowerks", value)


def detect_lib_std_rw(defines: Defines) -> Detection:
    """Roguewave library, versioned from ``_RWSTD_VER`` when present."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.is_defined("_RWSTD_VER"):
        level = defines.value("_RWSTD_VER", 0)
        value = make_0x_vvrrp(level) if level < 0x010000 else make_0x_vvrrpp(level)
    elif defines.is_defined("__STD_RWCOMPILER_H__"):
        value = VERSION_NUMBER_AVAILABLE
    return Detection("BOOST_LIB_STD_RW", "Roguewave", value)


def detect_lib_std_gnu(defines: Defines) -> Detection:
    """GNU libstdc++, versioned as years since 1970, month and day."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.is_defined("__GLIBCXX__"):
        value = make_yyyymmdd(defines.value("__GLIBCXX__", 0))
    elif defines.is_defined("__GLIBCPP__"):
        value = make_yyyymmdd(defines.value("__GLIBCPP__", 0))
    return Detection("BOOST_LIB_STD_GNU", "GNU", value)


def detect_lib_std_ibm(defines: Defines) -> Detection:
    """IBM VACPP library; no version is available."""
    value = (
        VERSION_NUMBER_AVAILABLE
        if defines.is_defined("__IBMCPP__")
        else VERSION_NUMBER_NOT_AVAILABLE
    )
    return Detection("BOOST_LIB_STD_IBM", "IBM VACPP", value)


def detect_libraries(defines: Defines) -> list[Detection]:
    """All C++ standard library detections, in their fixed order."""
    return [
        detect_lib_std_cxx(defines),
        detect_lib_std_como(defines),
        detect_lib_std_msl(defines),
        detect_lib_std_rw(defines),
        detect_lib_std_gnu(defines),
        detect_lib_std_ibm(defines),
    ]