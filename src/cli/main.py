"""Typer application.

The CLI only parses options, builds the chain through `core.services.chain`
and prints results; every read/write goes through the `DataSource` contract.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import chain_to_json, export_chain_json
from cli import doctor
from cli.logging_setup import setup_logging
from cli.ui_components import build_chain_table, build_result_panel, print_banner
from core.config import AppSettings
from core.domain.layers import LayerKind
from core.interfaces.data_source import DataSource
from core.services.chain import build_chain_from_settings, describe_chain

app = typer.Typer(
    name="layered-datasource",
    no_args_is_help=True,
    help="File-backed data source wrapped by compression and encryption layers.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

# Emits the "Encrypting data: ..." annotation on every write.
_ANNOTATION_LOGGER = "adapters.decorators.encryption"


@dataclass
class CliState:
    settings: AppSettings
    path: Path | None = None
    layers: list[LayerKind] | None = None

    def build(self) -> DataSource:
        return build_chain_from_settings(self.settings, path=self.path, layers=self.layers)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _io_failure(exc: OSError) -> typer.Exit:
    _err_console.print(f"[red]I/O error:[/red] {escape(str(exc))}", highlight=False)
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Backing file (overrides LAYERED_DS_DATA_PATH)."
    ),
    layer: Optional[List[str]] = typer.Option(
        None,
        "--layer",
        "-l",
        help="Layer to wrap around the source, innermost first. Repeatable.",
    ),
    no_layers: bool = typer.Option(False, "--no-layers", help="Use the bare file source."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show layer diagnostics."),
) -> None:
    settings = AppSettings()
    setup_logging("INFO" if verbose else settings.log_level)

    layers: list[LayerKind] | None = None
    if no_layers:
        layers = []
    elif layer:
        try:
            layers = [LayerKind.parse(name) for name in layer]
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--layer") from exc

    ctx.obj = CliState(settings=settings, path=path, layers=layers)


@app.command()
def demo(
    ctx: typer.Context,
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Write the sample text through the chain, showing layer annotations, and read it back."""

    state = _state(ctx)
    if banner:
        print_banner(_console)

    annotations = logging.getLogger(_ANNOTATION_LOGGER)
    previous_level = annotations.level
    if annotations.getEffectiveLevel() > logging.INFO:
        annotations.setLevel(logging.INFO)

    data_source = state.build()
    try:
        data_source.write_data(state.settings.sample_text)
        read_data = data_source.read_data()
    except OSError as exc:
        raise _io_failure(exc) from exc
    finally:
        annotations.setLevel(previous_level)

    _console.print(f"Read data: {read_data}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def write(ctx: typer.Context, text: str = typer.Argument(..., help="Text to store.")) -> None:
    """Store TEXT through the chain, replacing previous contents."""

    data_source = _state(ctx).build()
    try:
        data_source.write_data(text)
    except OSError as exc:
        raise _io_failure(exc) from exc


@app.command()
def read(
    ctx: typer.Context,
    pretty: bool = typer.Option(False, "--pretty", help="Render the value in a panel."),
) -> None:
    """Read the stored text through the chain."""

    data_source = _state(ctx).build()
    try:
        value = data_source.read_data()
    except OSError as exc:
        raise _io_failure(exc) from exc

    if pretty:
        _console.print(build_result_panel("Read data", value))
    else:
        _console.print(value, markup=False, highlight=False, soft_wrap=True)


@app.command()
def inspect(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the description as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Show the layers of the configured chain, outermost first."""

    description = describe_chain(_state(ctx).build())

    if output is not None:
        written = export_chain_json(description=description, output_path=output)
        _console.print(f"[green]Saved chain description to:[/green] {written}")
        return
    if as_json:
        _console.print(chain_to_json(description), markup=False, highlight=False, soft_wrap=True, end="")
        return
    _console.print(build_chain_table(description))


def run() -> None:
    app()
