"""Default interpreter versions from the environment and the ``py.ini`` file."""

from __future__ import annotations

import configparser
import logging
import os
from typing import TYPE_CHECKING, Final

from platformdirs import user_data_path

from ._spec import AnyMajor, ExactMinor, parse_version_spec

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from ._spec import Specifier

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
CONFIG_FILE_NAME: Final[str] = "py.ini"
DEFAULTS_SECTION: Final[str] = "defaults"


class Config:
    """
    Configured default versions.

    A key such as ``python3`` is looked up first as the ``PY_PYTHON3`` environment variable, then in the ``[defaults]``
    section of ``py.ini`` inside the user data directory.
    """

    def __init__(self, env: Mapping[str, str] | None = None, path: Path | None = None) -> None:
        self._env = os.environ if env is None else env
        self._path = user_data_path() / CONFIG_FILE_NAME if path is None else path
        self._parser = configparser.ConfigParser(interpolation=None)
        if os.path.isfile(self._path):
            try:
                self._parser.read(self._path, encoding="utf-8")
            except (configparser.Error, OSError, UnicodeDecodeError) as exception:
                _LOGGER.warning("ignore invalid configuration file %s: %s", self._path, exception)
                self._parser = configparser.ConfigParser(interpolation=None)
            else:
                _LOGGER.debug("loaded configuration from %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def default_python(self) -> str | None:
        return self._default_value("python")

    def default_python_for(self, major: int) -> str | None:
        return self._default_value(f"python{major}")

    def _default_value(self, key: str) -> str | None:
        if value := self._env.get(f"PY_{key.upper()}"):
            return value
        return self._parser.get(DEFAULTS_SECTION, key.lower(), fallback=None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r})"


def resolve_spec(spec: Specifier | None, config: Config) -> Specifier | None:
    """Narrow *spec* with the configured defaults; a ``major.minor`` request is already exact and kept as is."""
    if isinstance(spec, ExactMinor):
        return spec
    if isinstance(spec, AnyMajor):
        key, value = f"python{spec.major}", config.default_python_for(spec.major)
    else:
        key, value = "python", config.default_python()
    if value is None:
        return spec
    if (resolved := parse_version_spec(value.strip())) is None:
        # keep the request rather than dropping to no preference
        _LOGGER.warning("ignore invalid default version %r for %s", value, key)
        return spec
    _LOGGER.debug("default for %s is %s", key, resolved)
    return resolved


__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULTS_SECTION",
    "Config",
    "resolve_spec",
]
