"""Detection of development platforms."""

from __future__ import annotations

from predefinfo.detection import Defines, Detection
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    VERSION_NUMBER_NOT_AVAILABLE,
    version_number,
)

_MINGW_NAME = "MinGW (any variety)"
_MINGW64_NAME = "MinGW-w64"


def _settle(symbol: str, description: str, found: int, already_detected: bool) -> Detection:
    if already_detected:
        return Detection(symbol, description, VERSION_NUMBER_NOT_AVAILABLE, found)
    return Detection(symbol, description, found)


def _mingw64_version(defines: Defines) -> int | None:
    if defines.is_defined("__MINGW64_VERSION_MAJOR") and defines.is_defined(
        "__MINGW64_VERSION_MINOR"
    ):
        return version_number(
            defines.value("__MINGW64_VERSION_MAJOR", 0),
            defines.value("__MINGW64_VERSION_MINOR", 0),
            0,
        )
    return None


def detect_cloudabi(defines: Defines) -> Detection:
    """CloudABI platform."""
    value = (
        VERSION_NUMBER_AVAILABLE
        if defines.is_defined("__CloudABI__")
        else VERSION_NUMBER_NOT_AVAILABLE
    )
    return Detection("BOOST_PLAT_CLOUDABI", "CloudABI", value)


def detect_mingw(defines: Defines, already_detected: bool) -> Detection:
    """MinGW of either variety; emulated when a platform was already detected."""
    if not defines.any_defined("__MINGW32__", "__MINGW64__"):
        return Detection("BOOST_PLAT_MINGW", _MINGW_NAME)
    found = _mingw64_version(defines)
    if found is None and defines.is_defined("__MINGW32_VERSION_MAJOR") and defines.is_defined(
        "__MINGW32_VERSION_MINOR"
    ):
        # The presence check and the values read use differently spelled names.
        found = version_number(
            defines.value("__MINGW32_MAJOR_VERSION", 0),
            defines.value("__MINGW32_MINOR_VERSION", 0),
            0,
        )
    if found is None:
        found = VERSION_NUMBER_AVAILABLE
    return _settle("BOOST_PLAT_MINGW", _MINGW_NAME, found, already_detected)


def detect_mingw64(defines: Defines, already_detected: bool) -> Detection:
    """MinGW-w64; emulated when a platform was already detected."""
    if not defines.is_defined("__MINGW64__"):
        return Detection("BOOST_PLAT_MINGW64", _MINGW64_NAME)
    found = _mingw64_version(defines)
    if found is None:
        found = VERSION_NUMBER_AVAILABLE
    return _settle("BOOST_PLAT_MINGW64", _MINGW64_NAME, found, already_detected)


def detect_platforms(defines: Defines) -> list[Detection]:
    """Platform detections in order; the first one found makes later ones emulated."""
    cloudabi = detect_cloudabi(defines)
    found = cloudabi.detected()
    mingw = detect_mingw(defines, found)
    found = found or defines.any_defined("__MINGW32__", "__MINGW64__")
    mingw64 = detect_mingw64(defines, found)
    return [cloudabi, mingw, mingw64]