import pytest

from predefinfo.detection import Defines
from predefinfo.make import make_10_vvrr
from predefinfo.os import (
    detect_cygwin,
    detect_haiku,
    detect_hpux,
    detect_ios,
    detect_irix,
    detect_linux,
    detect_operating_systems,
    detect_os400,
    detect_qnx,
    detect_svr4,
    detect_unix,
)
from predefinfo.version_number import VERSION_NUMBER_AVAILABLE, version_number


@pytest.mark.parametrize("marker", ["linux", "__linux", "__linux__", "__gnu_linux__"])
def test_linux_markers(marker):
    detection = detect_linux(Defines([marker]), False)
    assert detection.value == VERSION_NUMBER_AVAILABLE
    assert detection.description == "Linux"


def test_linux_suppressed_when_already_detected():
    assert not detect_linux(Defines(["__linux__"]), True).detected()


@pytest.mark.parametrize(
    "detector,marker",
    [
        (detect_haiku, "__HAIKU__"),
        (detect_hpux, "__hpux"),
        (detect_irix, "__sgi"),
        (detect_os400, "__OS400__"),
    ],
)
def test_marker_only_systems(detector, marker):
    assert detector(Defines([marker]), False).value == VERSION_NUMBER_AVAILABLE
    assert not detector(Defines([marker]), True).detected()
    assert not detector(Defines(), False).detected()


def test_unix_and_svr4_ignore_other_detection():
    assert detect_unix(Defines(["__unix"])).detected()
    assert detect_svr4(Defines(["__SVR4"])).detected()
    assert not detect_unix(Defines()).detected()


def test_cygwin_version():
    defines = Defines(
        {"__CYGWIN__": 1, "CYGWIN_VERSION_API_MAJOR": 0, "CYGWIN_VERSION_API_MINOR": 34}
    )
    assert detect_cygwin(defines, False).version() == (0, 34, 0)
    assert not detect_cygwin(defines, True).detected()


def test_ios_version_scaled():
    required = 80000
    defines = Defines(
        {
            "__APPLE__": 1,
            "__MACH__": 1,
            "__ENVIRONMENT_IPHONE_OS_VERSION_MIN_REQUIRED__": required,
        }
    )
    assert detect_ios(defines, False).value == required * 1000


def test_ios_needs_all_markers():
    assert not detect_ios(Defines(["__APPLE__", "__MACH__"]), False).detected()


def test_qnx_versions():
    assert detect_qnx(Defines({"__QNXNTO__": 1, "_NTO_VERSION": 632}), False).value == make_10_vvrr(632)
    assert detect_qnx(Defines(["__QNX__"]), False).value == version_number(4, 0, 0)
    assert detect_qnx(Defines(["__QNXNTO__"]), False).value == VERSION_NUMBER_AVAILABLE


def test_operating_systems_symbols_unique():
    symbols = [d.symbol for d in detect_operating_systems(Defines())]
    assert len(symbols) == len(set(symbols))
    assert "BOOST_OS_BSD_NET" in symbols