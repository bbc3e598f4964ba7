"""A version specifier is the user's request for an interpreter, e.g. ``-3`` or ``-3.12``."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from string import digits
from typing import TYPE_CHECKING, Final, NamedTuple, Union

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._version import VersionTriple

_DC_KW = {"frozen": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}

U8_MAX: Final[int] = 0xFF
U16_MAX: Final[int] = 0xFFFF
_SPEC_PARTS: Final[int] = 2


class SpecPart(NamedTuple):
    """One run of digits, and whether a dot terminated it."""

    value: int
    dot: bool


def parse_spec_part(chars: Iterator[str], limit: int) -> SpecPart | None:
    """
    Consume one run of ASCII digits from *chars*.

    The run ends at a dot (consumed) or at the end of input. ``None`` means the run was empty, held a character that
    is neither a digit nor a dot, or grew beyond *limit*.
    """
    value = 0
    empty = True
    for char in chars:
        if char == ".":
            return None if empty else SpecPart(value, dot=True)
        if char not in digits:
            return None
        value = value * 10 + ord(char) - ord("0")
        if value > limit:
            return None
        empty = False
    return None if empty else SpecPart(value, dot=False)


def parse_release(text: str, max_parts: int, limit: int) -> list[int] | None:
    """Parse dot separated numbers (``3``, ``3.12``, ...), at most *max_parts* of them, each at most *limit*."""
    chars = iter(text)
    release: list[int] = []
    while len(release) < max_parts:
        if (part := parse_spec_part(chars, limit)) is None:
            return None
        release.append(part.value)
        if not part.dot:
            return release
    return None  # the last allowed part was followed by a dot


@dataclass(**_DC_KW)
class AnyMajor:
    """Any interpreter of the given major version."""

    major: int

    def matches(self, version: VersionTriple) -> bool:
        return version.major == self.major

    def __str__(self) -> str:
        return str(self.major)


@dataclass(**_DC_KW)
class ExactMinor:
    """Any interpreter of the given major and minor version, whatever its micro version."""

    major: int
    minor: int

    def matches(self, version: VersionTriple) -> bool:
        return version.major == self.major and version.minor == self.minor

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


Specifier = Union[AnyMajor, ExactMinor]


def parse_version_spec(text: str) -> Specifier | None:
    """Parse ``X`` or ``X.Y`` into a specifier, ``None`` if *text* is anything else."""
    if (release := parse_release(text, _SPEC_PARTS, U8_MAX)) is None:
        return None
    if len(release) == 1:
        return AnyMajor(release[0])
    return ExactMinor(release[0], release[1])


def parse_spec(text: str) -> Specifier | None:
    """Parse a launcher option (``-X`` or ``-X.Y``); ``None`` means *text* is not a version option at all."""
    if not text.startswith("-"):
        return None
    return parse_version_spec(text[1:])


__all__ = [
    "U16_MAX",
    "U8_MAX",
    "AnyMajor",
    "ExactMinor",
    "SpecPart",
    "Specifier",
    "parse_release",
    "parse_spec",
    "parse_spec_part",
    "parse_version_spec",
]
