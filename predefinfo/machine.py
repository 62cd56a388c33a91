"""Detection of PowerPC and 32-bit x86, word sizes, and the full architecture list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from predefinfo.architecture import (
    detect_alpha,
    detect_blackfin,
    detect_convex,
    detect_e2k,
    detect_loongarch,
    detect_mips,
    detect_riscv,
    detect_sparc,
    detect_sys370,
    detect_sys390,
)
from predefinfo.detection import Defines, Detection
from predefinfo.make import make_10_vv00
from predefinfo.version_number import (
    VERSION_NUMBER_AVAILABLE,
    version_number,
)

__all__ = [
    "detect_architectures",
    "detect_ppc",
    "detect_ppc_64",
    "detect_x86_32",
    "word_bits",
]

_PPC_MARKERS = (
    "__powerpc",
    "__powerpc__",
    "__powerpc64__",
    "__POWERPC__",
    "__ppc__",
    "__ppc64__",
    "__PPC__",
    "__PPC64__",
    "_M_PPC",
    "_ARCH_PPC",
    "_ARCH_PPC64",
    "__PPCGECKO__",
    "__PPCBROADWAY__",
    "_XENON",
    "__ppc",
)

_PPC_64_MARKERS = ("__powerpc64__", "__ppc64__", "__PPC64__", "_ARCH_PPC64")

_X86_32_MARKERS = (
    "i386",
    "__i386__",
    "__i486__",
    "__i586__",
    "__i686__",
    "__i386",
    "_M_IX86",
    "_X86_",
    "__THW_INTEL__",
    "__I86__",
    "__INTEL__",
)


def _first_variant(
    defines: Defines, variants: Iterable[tuple[Sequence[str], int]]
) -> int:
    for names, version in variants:
        if defines.any_defined(*names):
            return version
    return VERSION_NUMBER_AVAILABLE


def detect_ppc(defines: Defines) -> Detection:
    """PowerPC, with the 601, 603 and 604 told apart."""
    symbol, description = "BOOST_ARCH_PPC", "PowerPC"
    if not defines.any_defined(*_PPC_MARKERS):
        return Detection(symbol, description)
    value = _first_variant(
        defines,
        (
            (("__ppc601__", "_ARCH_601"), version_number(6, 1, 0)),
            (("__ppc603__", "_ARCH_603"), version_number(6, 3, 0)),
            (("__ppc604__",), version_number(6, 4, 0)),
        ),
    )
    return Detection(symbol, description, value)


def detect_ppc_64(defines: Defines) -> Detection:
    """64-bit PowerPC."""
    symbol, description = "BOOST_ARCH_PPC_64", "PowerPC64"
    if not defines.any_defined(*_PPC_64_MARKERS):
        return Detection(symbol, description)
    return Detection(symbol, description, VERSION_NUMBER_AVAILABLE)


def detect_x86_32(defines: Defines) -> Detection:
    """32-bit Intel x86, with generations 3 to 6 told apart when possible."""
    symbol, description = "BOOST_ARCH_X86_32", "Intel x86-32"
    if not defines.any_defined(*_X86_32_MARKERS):
        return Detection(symbol, description)
    if defines.is_defined("__I86__"):
        value = version_number(defines.value("__I86__", 0), 0, 0)
    elif defines.is_defined("_M_IX86"):
        value = make_10_vv00(defines.value("_M_IX86", 0))
    else:
        value = _first_variant(
            defines,
            (
                (("__i686__",), version_number(6, 0, 0)),
                (("__i586__",), version_number(5, 0, 0)),
                (("__i486__",), version_number(4, 0, 0)),
                (("__i386__",), version_number(3, 0, 0)),
            ),
        )
    return Detection(symbol, description, value)


def word_bits(defines: Defines) -> frozenset[int]:
    """The word sizes in bits that the detected architectures flag.

    The PowerPC rule flags 32 bits whenever 64-bit PowerPC is not detected,
    whatever the architecture, so 32 is flagged unless that holds.
    """
    bits: set[int] = set()
    if detect_alpha(defines).detected():
        bits.add(64)
    if detect_blackfin(defines).detected():
        bits.add(16)
    if detect_convex(defines).detected():
        bits.add(32)
    if detect_e2k(defines).detected():
        bits.add(64)
    mips = detect_mips(defines)
    if mips.detected():
        bits.add(64 if mips.value >= version_number(3, 0, 0) else 32)
    bits.add(64 if detect_ppc_64(defines).detected() else 32)
    if detect_riscv(defines).detected():
        bits.add(32)
    sparc = detect_sparc(defines)
    if sparc.detected():
        bits.add(64 if sparc.value >= version_number(9, 0, 0) else 32)
    if detect_sys370(defines).detected():
        bits.add(32)
    if detect_sys390(defines).detected():
        bits.add(32)
    if detect_x86_32(defines).detected():
        bits.add(32)
    return frozenset(bits)


def detect_architectures(defines: Defines) -> list[Detection]:
    """All architecture detections, in their fixed order."""
    return [
        detect_alpha(defines),
        detect_blackfin(defines),
        detect_convex(defines),
        detect_e2k(defines),
        detect_loongarch(defines),
        detect_mips(defines),
        detect_ppc(defines),
        detect_ppc_64(defines),
        detect_riscv(defines),
        detect_sparc(defines),
        detect_sys370(defines),
        detect_sys390(defines),
        detect_x86_32(defines),
    ]