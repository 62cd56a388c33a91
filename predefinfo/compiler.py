"""Detection of the compilers that are most often met today."""

from __future__ import annotations

from predefinfo.detection import Defines, Detection
from predefinfo.make import (
    make_0x_vrrpppp,
    make_0x_vvrp,
    make_0x_vvrr,
    make_10_vrp,
    make_10_vrr,
    make_10_vvrrpp,
)
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    version_number,
)

__all__ = [
    "CompilerVersionError",
    "detect_borland",
    "detect_edg",
    "detect_gnuc",
    "detect_hpacc",
    "detect_ibm",
    "detect_llvm",
    "detect_msvc",
    "detect_nvcc",
]


class CompilerVersionError(ValueError):
    """A compiler's version macros cannot be decoded."""


def _settle(
    symbol: str, description: str, found: int | None, already_detected: bool
) -> Detection:
    """Record a found version, as emulated when a compiler was detected before."""
    if found is None:
        return Detection(symbol, description)
    if already_detected:
        return Detection(symbol, description, emulated=found)
    return Detection(symbol, description, found)


def detect_gnuc(defines: Defines, already_detected: bool) -> Detection:
    """Gnu GCC C/C++, versioned as major, minor and patch level when available."""
    found = None
    if defines.is_defined("__GNUC__"):
        found = version_number(
            defines.value("__GNUC__", 0),
            defines.value("__GNUC_MINOR__", 0),
            defines.value("__GNUC_PATCHLEVEL__", 0)
            if defines.is_defined("__GNUC_PATCHLEVEL__")
            else 0,
        )
    return _settle("BOOST_COMP_GNUC", "Gnu GCC C/C++", found, already_detected)


def detect_llvm(defines: Defines, already_detected: bool) -> Detection:
    """LLVM compiler; no version is available."""
    found = VERSION_NUMBER_AVAILABLE if defines.is_defined("__llvm__") else None
    return _settle("BOOST_COMP_LLVM", "LLVM", found, already_detected)


def _msvc_build(defines: Defines, msc_ver: int) -> int:
    if not defines.is_defined("_MSC_FULL_VER"):
        return 0
    full = defines.value("_MSC_FULL_VER", 0)
    if full // 10000 == msc_ver:
        return full % 10000
    if full // 100000 == msc_ver:
        return full % 100000
    raise CompilerVersionError("Cannot determine build number from _MSC_FULL_VER")


def detect_msvc(defines: Defines, already_detected: bool) -> Detection:
    """Microsoft Visual C/C++.

    Up to 2015 the version is the marketing product version; later releases
    use the compiler version (``_MSC_VER``) directly.
    """
    found = None
    if defines.is_defined("_MSC_VER"):
        msc_ver = defines.value("_MSC_VER", 0)
        build = _msvc_build(defines, msc_ver)
        if msc_ver > 1900:
            major = msc_ver // 100
        elif msc_ver >= 1900:
            major = msc_ver // 100 - 5
        else:
            major = msc_ver // 100 - 6
        found = version_number(major, msc_ver % 100, build)
    return _settle(
        "BOOST_COMP_MSVC", "Microsoft Visual C/C++", found, already_detected
    )


def detect_nvcc(defines: Defines) -> Detection:
    """NVCC; always reported directly, alongside the host compiler."""
    if not defines.is_defined("__NVCC__"):
        return Detection("BOOST_COMP_NVCC", "NVCC")
    parts = ("__CUDACC_VER_MAJOR__", "__CUDACC_VER_MINOR__", "__CUDACC_VER_BUILD__")
    if all(defines.is_defined(name) for name in parts):
        found = version_number(*(defines.value(name, 0) for name in parts))
    else:
        found = VERSION_NUMBER_AVAILABLE
    return Detection("BOOST_COMP_NVCC", "NVCC", found)


def detect_ibm(defines: Defines, already_detected: bool) -> Detection:
    """IBM XL C/C++."""
    found = None
    if defines.any_defined("__IBMCPP__", "__xlC__", "__xlc__"):
        if defines.is_defined("__COMPILER_VER__"):
            found = make_0x_vrrpppp(defines.value("__COMPILER_VER__", 0))
        elif defines.is_defined("__xlC__"):
            found = make_0x_vvrr(defines.value("__xlC__", 0))
        elif defines.is_defined("__xlc__"):
            found = make_0x_vvrr(defines.value("__xlc__", 0))
        else:
            found = make_10_vrp(defines.value("__IBMCPP__", 0))
    return _settle("BOOST_COMP_IBM", "IBM XL C/C++", found, already_detected)


def detect_edg(defines: Defines, already_detected: bool) -> Detection:
    """EDG C++ Frontend, versioned from ``__EDG_VERSION__`` as V.RR.0."""
    found = None
    if defines.is_defined("__EDG__"):
        found = make_10_vrr(defines.value("__EDG_VERSION__", 0))
    return _settle("BOOST_COMP_EDG", "EDG C++ Frontend", found, already_detected)


def detect_hpacc(defines: Defines, already_detected: bool) -> Detection:
    """HP aC++."""
    found = None
    if defines.is_defined("__HP_aCC"):
        level = defines.value("__HP_aCC", 0)
        found = make_10_vvrrpp(level) if level > 1 else VERSION_NUMBER_AVAILABLE
    return _settle("BOOST_COMP_HPACC", "HP aC++", found, already_detected)


def detect_borland(defines: Defines, already_detected: bool) -> Detection:
    """Borland C++; ``__CODEGEARC__`` takes precedence over ``__BORLANDC__``."""
    found = None
    if defines.is_defined("__CODEGEARC__"):
        found = make_0x_vvrp(defines.value("__CODEGEARC__", 0))
    elif defines.is_defined("__BORLANDC__"):
        found = make_0x_vvrp(defines.value("__BORLANDC__", 0))
    return _settle("BOOST_COMP_BORLAND", "Borland C++", found, already_detected)