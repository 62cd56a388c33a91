import pytest

from predefinfo.detection import Defines
from predefinfo.library import (
    detect_lib_std_como,
    detect_lib_std_cxx,
    detect_lib_std_gnu,
    detect_lib_std_ibm,
    detect_lib_std_msl,
    detect_lib_std_rw,
    detect_libraries,
)
from predefinfo.make import make_0x_vvrrp
from predefinfo.version_number import VERSION_NUMBER_AVAILABLE, version_number


def test_nothing_detected_for_empty_defines():
    found = detect_libraries(Defines())
    assert [d.detected() for d in found] == [False] * 6


def test_library_order_and_symbols():
    symbols = [d.symbol for d in detect_libraries(Defines())]
    assert symbols == [
        "BOOST_LIB_STD_CXX",
        "BOOST_LIB_STD_COMO",
        "BOOST_LIB_STD_MSL",
        "BOOST_LIB_STD_RW",
        "BOOST_LIB_STD_GNU",
        "BOOST_LIB_STD_IBM",
    ]


def test_libcxx_version():
    found = detect_lib_std_cxx(Defines({"_LIBCPP_VERSION": 15000}))
    assert found.description == "libc++"
    assert found.version() == (15, 0, 0)


def test_como_version_from_major():
    found = detect_lib_std_como(Defines({"__LIBCOMO__": 1, "__LIBCOMO_VERSION__": 31}))
    assert found.version() == (31, 0, 0)


def test_como_without_version_is_not_detected():
    assert not detect_lib_std_como(Defines(["__LIBCOMO__"])).detected()


def test_msl_cpp_preferred():
    found = detect_lib_std_msl(Defines({"__MSL_CPP__": "0xFFFF", "__MSL__": "0x1000"}))
    assert found.value == version_number(0xF, 0xF, 0xFF)


def test_msl_fallback():
    found = detect_lib_std_msl(Defines({"__MSL__": "0xFFFF"}))
    assert found.value == version_number(0xF, 0xF, 0xFF)


def test_roguewave_large_version():
    found = detect_lib_std_rw(Defines({"_RWSTD_VER": "0xFFFFFF"}))
    assert found.value == version_number(0xFF, 0xFF, 0xFF)


def test_roguewave_small_version():
    found = detect_lib_std_rw(Defines({"_RWSTD_VER": "0x4020"}))
    assert found.value == make_0x_vvrrp(0x4020)


def test_roguewave_marker_only():
    found = detect_lib_std_rw(Defines(["__STD_RWCOMPILER_H__"]))
    assert found.value == VERSION_NUMBER_AVAILABLE


@pytest.mark.parametrize("name", ["__GLIBCXX__", "__GLIBCPP__"])
def test_gnu_date_version(name):
    found = detect_lib_std_gnu(Defines({name: 20691231}))
    assert found.value == version_number(99, 12, 31)


def test_gnu_glibcxx_preferred():
    found = detect_lib_std_gnu(Defines({"__GLIBCXX__": 19710101, "__GLIBCPP__": 20691231}))
    assert found.value == version_number(1, 1, 1)


def test_ibm_detected_without_version():
    found = detect_lib_std_ibm(Defines(["__IBMCPP__"]))
    assert found.value == VERSION_NUMBER_AVAILABLE
    assert found.description == "IBM VACPP"


def test_detect_libraries_finds_gnu():
    found = {d.symbol: d for d in detect_libraries(Defines({"__GLIBCXX__": 19700101}))}
    assert found["BOOST_LIB_STD_GNU"].value == version_number(0, 1, 1)
    assert not found["BOOST_LIB_STD_CXX"].detected()