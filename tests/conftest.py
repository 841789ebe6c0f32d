"""Shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from adapters.decorators import DataSourceDecorator
from core.config import AppSettings


class RecordingSource:
    """In-memory DataSource that counts calls."""

    def __init__(self, initial: str = "") -> None:
        self.stored = initial
        self.writes: list[str] = []
        self.reads = 0

    def write_data(self, text: str) -> None:
        self.writes.append(text)
        self.stored = text

    def read_data(self) -> str:
        self.reads += 1
        return self.stored


class FailingSource:
    """DataSource whose backing location is always inaccessible."""

    def write_data(self, text: str) -> None:
        raise PermissionError("backing location is read-only")

    def read_data(self) -> str:
        raise FileNotFoundError("backing location is gone")


class TagDecorator(DataSourceDecorator):
    """Decorator with a true inverse transformation."""

    def write_data(self, text: str) -> None:
        self.wrappee.write_data(f"<{text}>")

    def read_data(self) -> str:
        return self.wrappee.read_data()[1:-1]


@pytest.fixture
def recording_source() -> RecordingSource:
    return RecordingSource()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.txt"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep AppSettings away from the developer's .env files and LAYERED_DS_* vars."""

    for key in list(os.environ):
        if key.upper().startswith("LAYERED_DS_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path / "user-config")
    monkeypatch.setitem(
        AppSettings.model_config,
        "env_file",
        (str(tmp_path / ".env"), str(tmp_path / "user-config" / ".env")),
    )
    monkeypatch.chdir(tmp_path)
