"""The ``py`` command: pick an interpreter from the first argument and replace this process with it."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from logging import basicConfig
from typing import TYPE_CHECKING, Final

from . import __version__
from ._config import Config, resolve_spec
from ._discovery import get_interpreter, get_virtual
from ._spec import parse_spec

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ._spec import Specifier

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
DEBUG_ENV: Final[str] = "PY_LAUNCHER_DEBUG"
_HELP_FLAGS: Final[frozenset[str]] = frozenset(("-h", "--help"))
_HELP: Final[str] = """\
Python Launcher for POSIX Version {version}

usage: {prog} [ launcher-arguments ] [ python-arguments ] script [ script-arguments ]

Launcher arguments:

-2     : Launch the latest Python 2.x version
-3     : Launch the latest Python 3.x version
-X.Y   : Launch the specified Python version

The following help text is from Python:
"""


class Invocation(Enum):
    DEFAULT = "default"
    HELP = "help"
    SPEC = "spec"


def get_invocation(args: Sequence[str]) -> tuple[Invocation, Specifier | None]:
    """Classify the command line (without the program name)."""
    if not args:
        return Invocation.DEFAULT, None
    if len(args) == 1 and args[0] in _HELP_FLAGS:
        return Invocation.HELP, None
    if (spec := parse_spec(args[0])) is not None:
        return Invocation.SPEC, spec
    return Invocation.DEFAULT, None


def find_python(spec: Specifier | None, env: Mapping[str, str], config: Config) -> str | None:
    """Location of the interpreter to launch; reports on stderr and returns ``None`` if it is not installed."""
    if spec is None and (python := get_virtual(env)) is not None:
        _LOGGER.info("use interpreter of active virtual environment %s", python)
        return python
    spec = resolve_spec(spec, config)
    if (python := get_interpreter(spec, env)) is not None:
        return python
    what = "Python" if spec is None else f"Requested Python version ({spec})"
    sys.stderr.write(f"{what} is not installed\n")
    return None


def run(python: str, args: Sequence[str]) -> int:
    """Replace the current process with *python*; only returns if that fails."""
    _LOGGER.debug("exec %s with arguments %r", python, args)
    try:
        os.execv(python, [python, *args])  # noqa: S606
    except OSError as exception:
        sys.stderr.write(f"Error: {exception}\n")
    return 1


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    env = os.environ if env is None else env
    if env.get(DEBUG_ENV):
        basicConfig(level=logging.DEBUG)
    prog, args = (argv[0] if argv else "py"), list(argv[1:])

    invocation, spec = get_invocation(args)
    if invocation is Invocation.HELP:
        sys.stdout.write(_HELP.format(version=__version__, prog=prog))
        sys.stdout.flush()
    elif invocation is Invocation.SPEC:
        args = args[1:]

    if (python := find_python(spec, env, Config(env))) is None:
        return 1
    return run(python, args)


__all__ = [
    "DEBUG_ENV",
    "Invocation",
    "find_python",
    "get_invocation",
    "main",
    "run",
]
