from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ._candidate import MANAGED_LAYOUT, Candidate

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterable, Mapping

    from ._spec import Specifier

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
MANAGED_DIR_ENV: Final[str] = "PY_MANAGED_DIR"
VIRTUAL_ENV_ENV: Final[str] = "VIRTUAL_ENV"


def get_interpreter(spec: Specifier | None = None, env: Mapping[str, str] | None = None) -> str | None:
    """
    Find the best installed interpreter for *spec*.

    :param spec: the requested version, ``None`` for no preference
    :param env: environment to read ``PATH`` and ``PY_MANAGED_DIR`` from, defaults to :data:`os.environ`
    :returns: location of the interpreter, or ``None`` if nothing installed satisfies *spec*
    """
    env = os.environ if env is None else env
    _LOGGER.info("find interpreter for spec %s", "<any>" if spec is None else spec)
    candidates = discover(get_managed_roots(env), get_paths(env))
    if (best := select(candidates, spec)) is None:
        return None
    _LOGGER.info("selected %r", best)
    return best.location


def select(candidates: Iterable[Candidate], spec: Specifier | None = None) -> Candidate | None:
    """Best of the *candidates* satisfying *spec* (all of them for ``None``), or ``None`` if there is none."""
    return max((c for c in candidates if spec is None or c.matches(spec)), default=None)


def discover(managed_roots: Iterable[str | Path], search_path: Iterable[str | Path]) -> list[Candidate]:
    """
    Collect every interpreter under the managed roots and on the search path.

    Each directory gets the next ordinal, managed roots first, so among equal versions the earlier declared source
    wins. Directories that are missing or unreadable contribute nothing.
    """
    candidates: list[Candidate] = []
    order = 0
    for kind, dirs, make in (
        ("managed", managed_roots, Candidate.from_managed),
        ("PATH", search_path, Candidate.from_executable),
    ):
        for directory in dirs:
            if not str(directory):
                continue
            _LOGGER.debug("discover %s[%d]=%s", kind, order, directory)
            candidates.extend(_propose(Path(directory), order, make))
            order += 1
    return candidates


def _propose(
    directory: Path,
    order: int,
    make: Callable[[Path, int], Candidate | None],
) -> Generator[Candidate, None, None]:
    for entry in scan_dir(directory):
        if (candidate := make(entry, order)) is not None:
            _LOGGER.debug("found %r", candidate)
            yield candidate


def scan_dir(directory: Path) -> Generator[Path, None, None]:
    """Lazily list *directory*; stop quietly if it cannot be read."""
    try:
        yield from directory.iterdir()
    except OSError as exception:
        _LOGGER.debug("cannot scan %s: %s", directory, exception)


def get_managed_roots(env: Mapping[str, str]) -> list[str]:
    value = env.get(MANAGED_DIR_ENV)
    return value.split(os.pathsep) if value else []


def get_paths(env: Mapping[str, str]) -> list[str]:
    path = env.get("PATH", None)
    if path is None:
        try:
            path = os.confstr("CS_PATH")
        except (AttributeError, ValueError):  # pragma: no cover # Windows only (no confstr)
            path = os.defpath
    return path.split(os.pathsep) if path else []


def get_virtual(env: Mapping[str, str]) -> str | None:
    """Interpreter of the active virtual environment, if there is one."""
    if not (root := env.get(VIRTUAL_ENV_ENV)):
        return None
    exe = os.path.join(root, *MANAGED_LAYOUT)
    if os.path.isfile(exe):
        return exe
    _LOGGER.debug("no interpreter at %s for active virtual environment", exe)
    return None


__all__ = [
    "MANAGED_DIR_ENV",
    "VIRTUAL_ENV_ENV",
    "discover",
    "get_interpreter",
    "get_managed_roots",
    "get_paths",
    "get_virtual",
    "scan_dir",
    "select",
]
