"""Write every sample frog to a JSON file, one document per frog."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from frogkit.cli.deps import get_settings
from frogkit.samples import build_samples

_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

console = Console()
app = typer.Typer(help="Export the demonstration frogs as JSON documents")


@app.command()
def main(
    output_dir: Path = typer.Option(Path("samples"), help="Directory receiving the JSON files"),
) -> None:
    settings = get_settings()
    output_dir.mkdir(parents=True, exist_ok=True)
    for key, frog in build_samples().items():
        target = output_dir / f"{key}.json"
        target.write_text(
            json.dumps(frog.as_record(), indent=settings.json_indent or None) + "\n",
            encoding="utf-8",
        )
        console.print(f"[green]Wrote[/green] {target}")


if __name__ == "__main__":
    app()
