import pytest

from predefinfo.detection import Defines, Detection, parse_defines
from predefinfo.version_number import VERSION_NUMBER_AVAILABLE, version_number

DUMP = """\
#define __GNUC__ 12
#define __cplusplus 201703L
#define __linux__ 1
#define __STDC__
#define __VERSION__ "12.2.0"
#define max(a, b) ((a) > (b) ? (a) : (b))
#define __SIZEOF_INT__ 4
#undef __SIZEOF_INT__
int unrelated_line;
"""


def test_parse_defines_reads_object_like_macros():
    defines = parse_defines(DUMP)
    assert set(defines) == {"__GNUC__", "__cplusplus", "__linux__", "__STDC__", "__VERSION__"}
    assert defines["__VERSION__"] == '"12.2.0"'
    assert defines["__STDC__"] == ""


def test_parse_defines_skips_function_like_and_undef():
    defines = parse_defines(DUMP)
    assert not defines.is_defined("max")
    assert not defines.is_defined("__SIZEOF_INT__")


def test_value_parses_integer_literals():
    defines = parse_defines(DUMP)
    assert defines.value("__GNUC__", 0) == 12
    assert defines.value("__cplusplus", 0) == 201703


def test_value_falls_back_to_default():
    defines = parse_defines(DUMP)
    assert defines.value("__VERSION__", -1) == -1
    assert defines.value("__STDC__", -1) == -1
    assert defines.value("__nothing__", -7) == -7


@pytest.mark.parametrize("text, expected", [("0x10", 16), ("010", 8), ("(42)", 42), ("5u", 5)])
def test_value_bases_and_suffixes(text, expected):
    assert Defines({"X": text}).value("X", 0) == expected


def test_names_alone_are_defined_to_one():
    defines = Defines(["__linux__", "unix"])
    assert defines.is_defined("unix")
    assert defines.value("__linux__", 0) == 1
    assert len(defines) == 2


def test_any_defined():
    defines = Defines({"__sgi": 1})
    assert defines.any_defined("sgi", "__sgi")
    assert not defines.any_defined("sgi", "__irix")
    assert not defines.any_defined()


def test_int_values_are_stored_as_text():
    defines = Defines({"A": 7, "B": None})
    assert defines["A"] == "7"
    assert defines.value("A", 0) == 7
    assert defines.is_defined("B")


def test_detection_version_and_detected():
    hit = Detection("BOOST_ARCH_ALPHA", "DEC Alpha", version_number(4, 1, 0))
    assert hit.detected()
    assert hit.version() == (4, 1, 0)


def test_detection_defaults_to_not_detected():
    miss = Detection("BOOST_ARCH_ALPHA", "DEC Alpha")
    assert not miss.detected()
    assert miss.version() == (0, 0, 0)
    assert not miss.emulated


def test_emulated_detection_is_not_detected():
    entry = Detection("BOOST_PLAT_MINGW", "MinGW (any variety)", emulated=VERSION_NUMBER_AVAILABLE)
    assert not entry.detected()
    assert entry.emulated == VERSION_NUMBER_AVAILABLE