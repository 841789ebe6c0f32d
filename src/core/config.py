"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so the CLI and the
  adapters read the same values.
- The backing location is a setting, not a literal in the entry point.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.layers import LayerKind

APP_NAME = "layered-datasource"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Create or update variables in the user-level .env file.

    Keys whose value is None are left untouched.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# layered-datasource user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Precedence (pydantic-settings, later `env_file` entries win): init kwargs,
    environment variables, user `.env`, project `.env`, field defaults. A path
    stored with `doctor set-path` therefore beats the project `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="LAYERED_DS_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    data_path: Path = Field(
        default=Path("data.txt"),
        description="Backing file of the concrete data source.",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Text encoding used to read and write the backing file.",
    )
    layers: list[LayerKind] = Field(
        default_factory=LayerKind.default_stack,
        description="Decorators wrapped around the source, innermost first.",
    )
    sample_text: str = Field(
        default="This is some data to write",
        description="Text written by the `demo` command.",
    )
    decrypt_marker: str = Field(
        default="Decrypted data: ",
        description="Marker prepended by the encryption layer on read.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value!r}")
        return level
