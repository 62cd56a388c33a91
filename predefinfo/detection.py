"""Predefined macro sets and the detection records built from them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from predefinfo.version_number import (
    VERSION_NUMBER_NOT_AVAILABLE,
    version_major,
    version_minor,
    version_patch,
)

_DEFINE_RE = re.compile(
    r"^\s*#\s*define\s+([A-Za-z_]\w*)(\()?(?:[^\s]*?\))?(?:\s+(.*?))?\s*$"
)
_UNDEF_RE = re.compile(r"^\s*#\s*undef\s+([A-Za-z_]\w*)\s*$")
_INT_RE = re.compile(r"^([+-]?)(0[xX][0-9a-fA-F]+|0[bB][01]+|[0-9]+)[uUlL]*$")


def _parse_int(text: str) -> int | None:
    text = text.strip()
    while text.startswith("(") and text.endswith(")"):
        text = text[1:-1].strip()
    match = _INT_RE.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    lowered = digits.lower()
    if lowered.startswith("0x"):
        number = int(lowered[2:], 16)
    elif lowered.startswith("0b"):
        number = int(lowered[2:], 2)
    elif len(digits) > 1 and digits.startswith("0"):
        try:
            number = int(digits, 8)
        except ValueError:
            return None
    else:
        number = int(digits)
    return -number if sign == "-" else number


class Defines(Mapping[str, str]):
    """The set of object-like macros a compiler predefines, name to replacement text.

    Built from a mapping of names to values or from an iterable of bare names;
    a bare name is defined to ``1`` as ``-DNAME`` would do.
    """

    def __init__(self, macros: Mapping[str, object] | Iterable[str] = ()) -> None:
        if isinstance(macros, Mapping):
            self._macros = {name: self._text(value) for name, value in macros.items()}
        else:
            self._macros = {name: "1" for name in macros}

    @staticmethod
    def _text(value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, int):
            return str(int(value))
        return str(value).strip()

    def __getitem__(self, name: str) -> str:
        return self._macros[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._macros)

    def __len__(self) -> int:
        return len(self._macros)

    def __repr__(self) -> str:
        return f"Defines({self._macros!r})"

    def is_defined(self, name: str) -> bool:
        return name in self._macros

    def any_defined(self, *args: str) -> bool:
        return any(name in self._macros for name in args)

    def value(self, name: str, default: int = 0) -> int:
        """Integer value of a macro; ``default`` when undefined or not an integer literal."""
        text = self._macros.get(name)
        if text is None:
            return default
        number = _parse_int(text)
        return default if number is None else number


def parse_defines(text: str) -> Defines:
    """Read ``#define`` lines, as a preprocessor dumps them, into a :class:`Defines`.

    Function-like macros are skipped and ``#undef`` removes an earlier name.
    """
    macros: dict[str, str] = {}
    for line in text.splitlines():
        undef = _UNDEF_RE.match(line)
        if undef:
            macros.pop(undef.group(1), None)
            continue
        match = _DEFINE_RE.match(line)
        if match is None or match.group(2):
            continue
        macros[match.group(1)] = (match.group(3) or "").strip()
    return Defines(macros)


@dataclass(frozen=True)
class Detection:
    """One detected predef: its symbol, description and packed version.

    ``emulated`` holds the version found while another entity of the same
    kind had already been detected; it is reported under ``<symbol>_EMULATED``.
    """

    symbol: str
    description: str
    value: int = VERSION_NUMBER_NOT_AVAILABLE
    emulated: int = VERSION_NUMBER_NOT_AVAILABLE

    def detected(self) -> bool:
        return self.value > 0

    def version(self) -> tuple[int, int, int]:
        return (
            version_major(self.value),
            version_minor(self.value),
            version_patch(self.value),
        )