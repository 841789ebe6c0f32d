"""Doctor commands: environment diagnostics and persisted configuration."""

from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_readable(path: Path) -> tuple[bool, str]:
    if not path.exists():
        return False, "Missing (run `write` or `demo` first)"
    if path.is_dir():
        return False, "Is a directory"
    if not os.access(path, os.R_OK):
        return False, "Not readable"
    return True, f"{path.stat().st_size} bytes"


def _check_writable(path: Path) -> tuple[bool, str]:
    if path.exists():
        if path.is_dir():
            return False, "Is a directory"
        return (True, "OK") if os.access(path, os.W_OK) else (False, "Not writable")
    parent = path.parent
    if not parent.is_dir():
        return False, f"Parent directory does not exist: {parent}"
    return (True, "Will be created") if os.access(parent, os.W_OK) else (False, "Parent not writable")


@app.command()
def run() -> None:
    """Check the configured backing file and show the configured layers."""

    settings = AppSettings()

    table = Table(title="layered-datasource Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Data path", "OK", str(settings.data_path))
    ok_read, detail_read = _check_readable(settings.data_path)
    table.add_row("Readable", "OK" if ok_read else "WARN", detail_read)
    ok_write, detail_write = _check_writable(settings.data_path)
    table.add_row("Writable", "OK" if ok_write else "FAIL", detail_write)

    layers = ", ".join(kind.value for kind in settings.layers) or "(none)"
    table.add_row("Layers", "OK", layers)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    _console.print(table)

    if not ok_write:
        raise typer.Exit(code=1)


@app.command(name="set-path")
def set_path(path: Path = typer.Argument(..., help="Backing file used by default.")) -> None:
    """Store the default data path in the user config .env."""

    if path.exists() and path.is_dir():
        raise typer.BadParameter(f"{path} is a directory")

    env_path = write_user_env_vars({"LAYERED_DS_DATA_PATH": str(path.resolve())})
    _console.print(f"[green]Saved data path to:[/green] {env_path}")
