"""Interpreter versions as read from file and directory names."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final

from ._spec import U16_MAX, parse_release

_DC_KW = {"frozen": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}

INTERPRETER_NAME: Final[str] = "python"
_MANAGED_PREFIXES: Final[tuple[str, ...]] = ("CPython-",)  # pythonz names its CPython builds this way
_MANAGED_PARTS: Final[int] = 3
_EXECUTABLE_PARTS: Final[int] = 2


def _sort_part(part: int | None) -> tuple[int, int]:
    return (0, 0) if part is None else (1, part)


@dataclass(**_DC_KW)
class VersionTriple:
    """
    Major, minor and micro version of an interpreter.

    Any component may be ``None``, meaning the name it was read from did not tell. An unknown component sorts below
    every known value at the same position.
    """

    major: int | None
    minor: int | None
    micro: int | None

    @property
    def sort_key(self) -> tuple[tuple[int, int], ...]:
        return tuple(_sort_part(part) for part in (self.major, self.minor, self.micro))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionTriple):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VersionTriple):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VersionTriple):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VersionTriple):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return ".".join("*" if part is None else str(part) for part in (self.major, self.minor, self.micro))


UNKNOWN_VERSION: Final[VersionTriple] = VersionTriple(None, None, None)


def version_from_managed_name(name: str) -> VersionTriple | None:
    """
    Version of a managed installation from its directory name (``3.12.1``, ``3.6``, ``CPython-2.7.18``).

    Managed installs are full releases, so ``3.6`` stands for ``3.6.0``.
    """
    for prefix in _MANAGED_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break
    if (release := parse_release(name, _MANAGED_PARTS, U16_MAX)) is None:
        return None
    release.extend([0] * (_MANAGED_PARTS - len(release)))
    return VersionTriple(*release)


def version_from_executable_name(name: str) -> VersionTriple | None:
    """
    Version of an interpreter from its executable name (``python``, ``python3``, ``python3.12``).

    Unlike a managed installation, ``python3`` says nothing about its minor version, so the missing components stay
    unknown.
    """
    if not name.startswith(INTERPRETER_NAME):
        return None
    suffix = name[len(INTERPRETER_NAME) :]
    if not suffix:
        return UNKNOWN_VERSION
    if (release := parse_release(suffix, _EXECUTABLE_PARTS, U16_MAX)) is None:
        return None
    major, minor = release[0], release[1] if len(release) > 1 else None
    return VersionTriple(major, minor, None)


__all__ = [
    "INTERPRETER_NAME",
    "UNKNOWN_VERSION",
    "VersionTriple",
    "version_from_executable_name",
    "version_from_managed_name",
]
