"""Typer CLI for building frogs."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from frogkit.builders import BuilderError, builder_from_mapping
from frogkit.samples import build_samples

from .deps import get_settings

app = typer.Typer(help="frogkit command-line interface")


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log Level:\t" + settings.log_level)
    typer.echo("JSON Indent:\t" + str(settings.json_indent))


@app.command("samples")
def samples() -> None:
    """Build the demonstration frogs and show them as a table."""

    get_settings()
    table = Table(title="Sample Frogs")
    table.add_column("Name", style="cyan")
    table.add_column("Scent")
    table.add_column("Habitat")
    table.add_column("Skin")
    table.add_column("Legs", justify="right")
    table.add_column("Tongue Width", justify="right")
    table.add_column("Heart Rate", justify="right")
    for frog in build_samples().values():
        table.add_row(
            frog.name,
            frog.scent,
            frog.habitat or "-",
            frog.skin or "-",
            str(len(frog.legs)),
            f"{frog.tongue.width:g}",
            f"{frog.heart.rate:g}",
        )
    Console().print(table)


@app.command("build")
def build(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    toad: bool = typer.Option(False, "--toad", help="Apply toad presets before the file's values"),
) -> None:
    """Build a frog from a JSON description and print the record."""

    settings = get_settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        typer.echo(f"Invalid JSON in {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    try:
        frog = builder_from_mapping(data, toad=toad).build()
    except BuilderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(frog.as_record(), indent=settings.json_indent or None))
