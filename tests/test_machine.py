import pytest

from predefinfo.detection import Defines
from predefinfo.make import make_10_vv00
from predefinfo.machine import (
    detect_architectures,
    detect_ppc,
    detect_ppc_64,
    detect_x86_32,
    word_bits,
)
from predefinfo.version_number import VERSION_NUMBER_AVAILABLE, version_number


@pytest.mark.parametrize(
    "marker, expected",
    [
        ("__ppc601__", version_number(6, 1, 0)),
        ("_ARCH_601", version_number(6, 1, 0)),
        ("__ppc603__", version_number(6, 3, 0)),
        ("_ARCH_603", version_number(6, 3, 0)),
        ("__ppc604__", version_number(6, 4, 0)),
    ],
)
def test_ppc_models(marker, expected):
    assert detect_ppc(Defines(["__powerpc__", marker])).value == expected


def test_ppc_plain():
    d = detect_ppc(Defines(["_ARCH_PPC"]))
    assert d.value == VERSION_NUMBER_AVAILABLE
    assert d.description == "PowerPC"


def test_ppc_model_without_marker_is_not_detected():
    assert detect_ppc(Defines(["__ppc601__"])).detected() is False


def test_ppc_64():
    assert detect_ppc_64(Defines(["__ppc64__"])).value == VERSION_NUMBER_AVAILABLE
    assert detect_ppc_64(Defines(["__powerpc__"])).detected() is False


def test_x86_32_i86_gives_major():
    d = detect_x86_32(Defines({"__I86__": 5}))
    assert d.value == version_number(5, 0, 0)


def test_x86_32_msvc_macro():
    d = detect_x86_32(Defines({"_M_IX86": 600}))
    assert d.value == make_10_vv00(600)


@pytest.mark.parametrize(
    "marker, expected",
    [
        ("__i686__", version_number(6, 0, 0)),
        ("__i586__", version_number(5, 0, 0)),
        ("__i486__", version_number(4, 0, 0)),
        ("__i386__", version_number(3, 0, 0)),
    ],
)
def test_x86_32_generations(marker, expected):
    assert detect_x86_32(Defines([marker])).value == expected


def test_x86_32_newest_generation_first():
    d = detect_x86_32(Defines(["__i386__", "__i686__"]))
    assert d.value == version_number(6, 0, 0)


def test_x86_32_generic():
    assert detect_x86_32(Defines(["_X86_"])).value == VERSION_NUMBER_AVAILABLE
    assert detect_x86_32(Defines()).detected() is False


def test_word_bits_ppc_rule_flags_32_by_default():
    assert word_bits(Defines()) == frozenset({32})


def test_word_bits_ppc64():
    assert word_bits(Defines(["__powerpc64__"])) == frozenset({64})


def test_word_bits_alpha_and_blackfin():
    assert 64 in word_bits(Defines(["__alpha__"]))
    assert 16 in word_bits(Defines(["__bfin__"]))


def test_word_bits_sparc_v9():
    assert word_bits(Defines(["__sparc__", "__sparcv9"])) == frozenset({32, 64})


def test_architectures_order_and_detection():
    detections = detect_architectures(Defines(["__i686__"]))
    symbols = [d.symbol for d in detections]
    assert symbols[0] == "BOOST_ARCH_ALPHA"
    assert symbols[-1] == "BOOST_ARCH_X86_32"
    assert len(symbols) == 13
    assert [d.symbol for d in detections if d.detected()] == ["BOOST_ARCH_X86_32"]