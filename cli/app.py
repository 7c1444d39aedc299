from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import pydantic
import typer

from cli.render import render_environment
from logging_config import configure_logging
from models.documents import EnvironmentDocument
from models.environment import Environment
from models.errors import EEMLError
from services.summary import Summarizer
from settings import Settings, get_settings


@dataclass
class CLIState:
    settings: Settings
    summarizer: Summarizer


app = typer.Typer(
    help="Inspect, build and export EEML environment documents.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1, message="CLI state is uninitialized.")
    return state


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _write_output(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    typer.secho(f"Wrote {output}", fg=typer.colors.GREEN, err=True)


def _load_environment(file: Path) -> Environment:
    try:
        return Environment.from_eeml(file.read_bytes())
    except EEMLError as exc:
        _fail(f"Could not read {file}: {exc}")


@app.callback()
def main(ctx: typer.Context) -> None:
    """Entry point for the CLI."""
    configure_logging()
    ctx.obj = CLIState(settings=get_settings(), summarizer=Summarizer())


@app.command("inspect")
def inspect_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Path to an EEML document."),
) -> None:
    """Show environment metadata and reading statistics."""
    state = _get_state(ctx)
    environment = _load_environment(file)
    render_environment(environment, state.summarizer.summarize(environment))


@app.command("build")
def build_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Path to a JSON environment document."),
    version: Optional[str] = typer.Option(
        None,
        "--version",
        help="Version attribute for the eeml root (defaults to EEML_DOCUMENT_VERSION).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the document to this path instead of stdout.",
    ),
) -> None:
    """Convert a JSON environment description into EEML."""
    state = _get_state(ctx)
    try:
        document = EnvironmentDocument.model_validate_json(file.read_text(encoding="utf-8"))
        eeml = document.to_environment().to_eeml(
            version if version is not None else state.settings.document_version
        )
    except (EEMLError, pydantic.ValidationError) as exc:
        _fail(f"Could not build {file}: {exc}")
    _write_output(eeml, output)


@app.command("export")
def export_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Path to an EEML document."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON to this path instead of stdout.",
    ),
) -> None:
    """Convert an EEML document into its JSON description."""
    state = _get_state(ctx)
    environment = _load_environment(file)
    document = EnvironmentDocument.from_environment(environment)
    _write_output(
        document.model_dump_json(indent=state.settings.json_indent, exclude_none=True),
        output,
    )
