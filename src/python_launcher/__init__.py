"""Pick the installed Python interpreter that best matches a version request."""

from __future__ import annotations

from importlib.metadata import version

from ._candidate import Candidate
from ._config import Config, resolve_spec
from ._discovery import discover, get_interpreter, select
from ._spec import AnyMajor, ExactMinor, Specifier, parse_spec
from ._version import UNKNOWN_VERSION, VersionTriple, version_from_executable_name, version_from_managed_name

__version__ = version("python-launcher")

__all__ = [
    "UNKNOWN_VERSION",
    "AnyMajor",
    "Candidate",
    "Config",
    "ExactMinor",
    "Specifier",
    "VersionTriple",
    "__version__",
    "discover",
    "get_interpreter",
    "parse_spec",
    "resolve_spec",
    "select",
    "version_from_executable_name",
    "version_from_managed_name",
]
