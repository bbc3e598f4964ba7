"""A discovered interpreter and how it ranks against the others."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from ._version import INTERPRETER_NAME, VersionTriple, version_from_executable_name, version_from_managed_name

if TYPE_CHECKING:
    from pathlib import Path

    from ._spec import Specifier

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
MANAGED_LAYOUT: Final[tuple[str, ...]] = ("bin", INTERPRETER_NAME)


@dataclass(**_DC_KW)
class Candidate:
    """
    An interpreter found on disk.

    :param location: path of the executable
    :param version: version read from the name it was found under
    :param order: discovery position of its source, used to break version ties (lower wins)

    Ordering ranks by version, then by discovery position. Equality compares every field, including the location, so two
    candidates of equal rank at different locations are neither ``<`` nor ``>`` each other yet compare unequal.
    """

    location: str
    version: VersionTriple
    order: int

    @classmethod
    def from_managed(cls, prefix: Path, order: int) -> Candidate | None:
        """Candidate for a managed installation directory holding ``bin/python``."""
        if (version := version_from_managed_name(prefix.name)) is None:
            return None
        exe = os.path.join(prefix, *MANAGED_LAYOUT)
        if not os.path.isfile(exe):
            _LOGGER.debug("skip %s, no interpreter at %s", prefix, exe)
            return None
        return cls(location=exe, version=version, order=order)

    @classmethod
    def from_executable(cls, path: Path, order: int) -> Candidate | None:
        """Candidate for a ``python*`` entry of a search path directory."""
        if (version := version_from_executable_name(path.name)) is None:
            return None
        if not os.path.exists(path):  # e.g. a dangling symlink
            return None
        return cls(location=str(path), version=version, order=order)

    def matches(self, spec: Specifier) -> bool:
        return spec.matches(self.version)

    @property
    def sort_key(self) -> tuple[VersionTriple, int]:
        # the order is negated, the earlier source wins among equal versions
        return self.version, -self.order

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r}, {self.version}, order={self.order})"


__all__ = [
    "MANAGED_LAYOUT",
    "Candidate",
]
