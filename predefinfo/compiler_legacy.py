"""Detection of older and less common compilers, and the full compiler list."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from predefinfo.compiler import (
    detect_borland,
    detect_edg,
    detect_gnuc,
    detect_hpacc,
    detect_ibm,
    detect_llvm,
    detect_msvc,
    detect_nvcc,
)
from predefinfo.detection import Defines, Detection
from predefinfo.make import make_0x_vrp, make_0x_vrpp, make_10_vrp, make_10_vrpp
from predefinfo.version_number import VERSION_NUMBER_AVAILABLE, version_number

__all__ = [
    "detect_como",
    "detect_compilers",
    "detect_diab",
    "detect_dmc",
    "detect_kcc",
    "detect_mwerks",
    "detect_sgi",
    "detect_tendra",
]


def _settle(
    symbol: str, description: str, found: int | None, already_detected: bool
) -> Detection:
    """Record a found version, as emulated when a compiler was detected before."""
    if found is None:
        return Detection(symbol, description)
    if already_detected:
        return Detection(symbol, description, emulated=found)
    return Detection(symbol, description, found)


def detect_como(defines: Defines, already_detected: bool) -> Detection:
    """Comeau C++, versioned from ``__COMO_VERSION__`` when present."""
    found = None
    if defines.is_defined("__COMO__"):
        if defines.is_defined("__COMO_VERSION__"):
            found = make_0x_vrp(defines.value("__COMO_VERSION__", 0))
        else:
            found = VERSION_NUMBER_AVAILABLE
    return _settle("BOOST_COMP_COMO", "Comeau C++", found, already_detected)


def detect_diab(defines: Defines, already_detected: bool) -> Detection:
    """Diab C/C++, versioned from ``__VERSION_NUMBER__``."""
    found = None
    if defines.is_defined("__DCC__"):
        found = make_10_vrpp(defines.value("__VERSION_NUMBER__", 0))
    return _settle("BOOST_COMP_DIAB", "Diab C/C++", found, already_detected)


def detect_dmc(defines: Defines, already_detected: bool) -> Detection:
    """Digital Mars, versioned from ``__DMC__``."""
    found = None
    if defines.is_defined("__DMC__"):
        found = make_0x_vrp(defines.value("__DMC__", 0))
    return _settle("BOOST_COMP_DMC", "Digital Mars", found, already_detected)


def detect_kcc(defines: Defines, already_detected: bool) -> Detection:
    """Kai C++, versioned from ``__KCC_VERSION``."""
    found = None
    if defines.is_defined("__KCC"):
        found = make_0x_vrpp(defines.value("__KCC_VERSION", 0))
    return _settle("BOOST_COMP_KCC", "Kai C++", found, already_detected)


def _mwerks_version(defines: Defines) -> int:
    if defines.is_defined("__CWCC__"):
        return make_0x_vrpp(defines.value("__CWCC__", 0))
    level = defines.value("__MWERKS__", 0)
    if level >= 0x4200:
        return make_0x_vrpp(level)
    if level >= 0x3204:
        # Note the skip: a trailing 04 means 9.3.
        return version_number(9, level % 100 - 1, 0)
    if level >= 0x3200:
        return version_number(9, level % 100, 0)
    if level >= 0x3000:
        return version_number(8, level % 100, 0)
    return VERSION_NUMBER_AVAILABLE


def detect_mwerks(defines: Defines, already_detected: bool) -> Detection:
    """Metrowerks CodeWarrior."""
    found = None
    if defines.any_defined("__MWERKS__", "__CWCC__"):
        found = _mwerks_version(defines)
    return _settle(
        "BOOST_COMP_MWERKS", "Metrowerks CodeWarrior", found, already_detected
    )


def detect_sgi(defines: Defines, already_detected: bool) -> Detection:
    """SGI MIPSpro."""
    found = None
    if defines.any_defined("__sgi", "sgi"):
        if defines.is_defined("_SGI_COMPILER_VERSION"):
            found = make_10_vrp(defines.value("_SGI_COMPILER_VERSION", 0))
        elif defines.is_defined("_COMPILER_VERSION"):
            found = make_10_vrp(defines.value("_COMPILER_VERSION", 0))
        else:
            found = VERSION_NUMBER_AVAILABLE
    return _settle("BOOST_COMP_SGI", "SGI MIPSpro", found, already_detected)


def detect_tendra(defines: Defines, already_detected: bool) -> Detection:
    """TenDRA C/C++; no version is available."""
    found = VERSION_NUMBER_AVAILABLE if defines.is_defined("__TenDRA__") else None
    return _settle("BOOST_COMP_TENDRA", "TenDRA C/C++", found, already_detected)


_Detector = Callable[[Defines, bool], Detection]

_COMPILERS: Sequence[tuple[_Detector, tuple[str, ...]]] = (
    (detect_borland, ("__BORLANDC__", "__CODEGEARC__")),
    (detect_como, ("__COMO__",)),
    (detect_diab, ("__DCC__",)),
    (detect_dmc, ("__DMC__",)),
    (detect_edg, ("__EDG__",)),
    (detect_gnuc, ("__GNUC__",)),
    (detect_hpacc, ("__HP_aCC",)),
    (detect_ibm, ("__IBMCPP__", "__xlC__", "__xlc__")),
    (detect_kcc, ("__KCC",)),
    (detect_llvm, ("__llvm__",)),
    (detect_mwerks, ("__MWERKS__", "__CWCC__")),
    (lambda defines, _seen: detect_nvcc(defines), ("__NVCC__",)),
    (detect_sgi, ("__sgi", "sgi")),
    (detect_tendra, ("__TenDRA__",)),
    (detect_msvc, ("_MSC_VER",)),
)


def detect_compilers(defines: Defines) -> list[Detection]:
    """All compiler detections in order.

    The first compiler found is reported directly; any found after it is
    reported as emulated. NVCC is always reported directly.
    """
    detections = []
    seen = False
    for detector, markers in _COMPILERS:
        detections.append(detector(defines, seen))
        seen = seen or defines.any_defined(*markers)
    return detections