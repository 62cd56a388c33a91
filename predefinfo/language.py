"""Detection of the source language being compiled."""

from __future__ import annotations

from predefinfo.detection import Defines, Detection
from predefinfo.make import make_10_vvrrp, make_yyyymm
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    VERSION_NUMBER_NOT_AVAILABLE,
)


def _standard_year(defines: Defines, name: str) -> int:
    if not defines.is_defined(name):
        return VERSION_NUMBER_NOT_AVAILABLE
    level = defines.value(name, 0)
    if level > 100:
        return make_yyyymm(level)
    return VERSION_NUMBER_AVAILABLE


def detect_cuda(defines: Defines) -> Detection:
    """CUDA C/C++, versioned from ``CUDA_VERSION`` as VV.RR.P when present."""
    value = VERSION_NUMBER_NOT_AVAILABLE
    if defines.any_defined("__CUDACC__", "__CUDA__"):
        if defines.is_defined("CUDA_VERSION"):
            value = make_10_vvrrp(defines.value("CUDA_VERSION", 0))
        else:
            value = VERSION_NUMBER_AVAILABLE
    return Detection("BOOST_LANG_CUDA", "CUDA C/C++", value)


def detect_stdcpp(defines: Defines) -> Detection:
    """Standard C++, versioned as years since 1970, month and 1."""
    return Detection(
        "BOOST_LANG_STDCPP", "Standard C++", _standard_year(defines, "__cplusplus")
    )


def detect_stdcppcli(defines: Defines) -> Detection:
    """Standard C++/CLI, versioned like standard C++."""
    return Detection(
        "BOOST_LANG_STDCPPCLI",
        "Standard C++/CLI",
        _standard_year(defines, "__cplusplus_cli"),
    )


def detect_stdecpp(defines: Defines) -> Detection:
    """Standard Embedded C++; no version is available."""
    value = (
        VERSION_NUMBER_AVAILABLE
        if defines.is_defined("__embedded_cplusplus")
        else VERSION_NUMBER_NOT_AVAILABLE
    )
    return Detection("BOOST_LANG_STDECPP", "Standard Embedded C++", value)


def detect_languages(defines: Defines) -> list[Detection]:
    """All language detections, in their fixed order."""
    return [
        detect_stdcpp(defines),
        detect_stdcppcli(defines),
        detect_stdecpp(defines),
        detect_cuda(defines),
    ]