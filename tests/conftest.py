from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolate_user_data(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    user_data = tmp_path_factory.mktemp("user_data")
    monkeypatch.setattr("python_launcher._config.user_data_path", lambda: user_data)


@pytest.fixture
def make_exe() -> Callable[[Path, str], Path]:
    def _make(directory: Path, name: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        exe = directory / name
        exe.write_text("#!/bin/sh\n", encoding="utf-8")
        exe.chmod(0o755)
        return exe

    return _make


@pytest.fixture
def make_managed(make_exe: Callable[[Path, str], Path]) -> Callable[[Path, str], Path]:
    def _make(root: Path, name: str) -> Path:
        return make_exe(root / name / "bin", "python")

    return _make
