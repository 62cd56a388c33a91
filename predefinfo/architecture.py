"""Detection of processor architectures that are identified by marker macros."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from predefinfo.detection import Defines, Detection
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    VERSION_NUMBER_NOT_AVAILABLE,
    version_number,
)

__all__ = [
    "detect_alpha",
    "detect_blackfin",
    "detect_convex",
    "detect_e2k",
    "detect_loongarch",
    "detect_mips",
    "detect_riscv",
    "detect_sparc",
    "detect_sys370",
    "detect_sys390",
]

_Variant = tuple[Sequence[str], int]


def _detect(
    defines: Defines,
    symbol: str,
    description: str,
    markers: Iterable[str],
    variants: Iterable[_Variant] = (),
) -> Detection:
    """Detect an architecture by its markers; the first matching variant sets the version."""
    if not defines.any_defined(*markers):
        return Detection(symbol, description, VERSION_NUMBER_NOT_AVAILABLE)
    for names, version in variants:
        if defines.any_defined(*names):
            return Detection(symbol, description, version)
    return Detection(symbol, description, VERSION_NUMBER_AVAILABLE)


def detect_alpha(defines: Defines) -> Detection:
    """DEC Alpha, with the EV4, EV5 and EV6 generations told apart."""
    return _detect(
        defines,
        "BOOST_ARCH_ALPHA",
        "DEC Alpha",
        ("__alpha__", "__alpha", "_M_ALPHA"),
        (
            (("__alpha_ev4__",), version_number(4, 0, 0)),
            (("__alpha_ev5__",), version_number(5, 0, 0)),
            (("__alpha_ev6__",), version_number(6, 0, 0)),
        ),
    )


def detect_blackfin(defines: Defines) -> Detection:
    """Blackfin processors."""
    return _detect(
        defines,
        "BOOST_ARCH_BLACKFIN",
        "Blackfin",
        ("__bfin__", "__BFIN__", "bfin", "BFIN"),
    )


def detect_convex(defines: Defines) -> Detection:
    """Convex Computer, with the C1, C2, C32, C34 and C38 models told apart."""
    return _detect(
        defines,
        "BOOST_ARCH_CONVEX",
        "Convex Computer",
        ("__convex__",),
        (
            (("__convex_c1__",), version_number(1, 0, 0)),
            (("__convex_c2__",), version_number(2, 0, 0)),
            (("__convex_c32__",), version_number(3, 2, 0)),
            (("__convex_c34__",), version_number(3, 4, 0)),
            (("__convex_c38__",), version_number(3, 8, 0)),
        ),
    )


def detect_e2k(defines: Defines) -> Detection:
    """E2K (Elbrus), versioned from the instruction set level ``__iset__``."""
    symbol, description = "BOOST_ARCH_E2K", "E2K"
    if not defines.is_defined("__e2k__"):
        return Detection(symbol, description)
    if defines.is_defined("__iset__"):
        return Detection(
            symbol, description, version_number(defines.value("__iset__", 0), 0, 0)
        )
    return Detection(symbol, description, VERSION_NUMBER_AVAILABLE)


def detect_loongarch(defines: Defines) -> Detection:
    """LoongArch."""
    return _detect(defines, "BOOST_ARCH_LOONGARCH", "LoongArch", ("__loongarch__",))


def detect_mips(defines: Defines) -> Detection:
    """MIPS; ``__mips`` gives the ISA level directly, else the ISA markers do."""
    symbol, description = "BOOST_ARCH_MIPS", "MIPS"
    if not defines.any_defined("__mips__", "__mips", "__MIPS__"):
        return Detection(symbol, description)
    if defines.is_defined("__mips"):
        return Detection(
            symbol, description, version_number(defines.value("__mips", 0), 0, 0)
        )
    return _detect(
        defines,
        symbol,
        description,
        ("__mips__", "__MIPS__"),
        (
            (("_MIPS_ISA_MIPS1", "_R3000"), version_number(1, 0, 0)),
            (("_MIPS_ISA_MIPS2", "__MIPS_ISA2__", "_R4000"), version_number(2, 0, 0)),
            (("_MIPS_ISA_MIPS3", "__MIPS_ISA3__"), version_number(3, 0, 0)),
            (("_MIPS_ISA_MIPS4", "__MIPS_ISA4__"), version_number(4, 0, 0)),
        ),
    )


def detect_riscv(defines: Defines) -> Detection:
    """RISC-V."""
    return _detect(defines, "BOOST_ARCH_RISCV", "RISC-V", ("__riscv",))


def detect_sparc(defines: Defines) -> Detection:
    """SPARC, with V9 and V8 told apart."""
    return _detect(
        defines,
        "BOOST_ARCH_SPARC",
        "SPARC",
        ("__sparc__", "__sparc"),
        (
            (("__sparcv9", "__sparc_v9__"), version_number(9, 0, 0)),
            (("__sparcv8", "__sparc_v8__"), version_number(8, 0, 0)),
        ),
    )


def detect_sys370(defines: Defines) -> Detection:
    """System/370."""
    return _detect(
        defines, "BOOST_ARCH_SYS370", "System/370", ("__370__", "__THW_370__")
    )


def detect_sys390(defines: Defines) -> Detection:
    """System/390."""
    return _detect(
        defines, "BOOST_ARCH_SYS390", "System/390", ("__s390__", "__s390x__")
    )