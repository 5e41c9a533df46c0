"""Command-line interface for the result normalizer."""

from __future__ import annotations

from pathlib import Path

import typer

from .config import load_settings
from .errors import TallyError
from .logging import configure_logging, get_logger
from .normalize import normalize_results_file
from .translate import load_configured_translations

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Aggregate stacked election result sheets per polling center")


@app.command()
def aggregate(
    input_path: Path = typer.Argument(..., help="Stacked result sheet (CSV)"),
    output_path: Path = typer.Argument(..., help="Where to write the per-center table"),
) -> None:
    try:
        settings = load_settings()
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    configure_logging(settings.log_level)

    try:
        translations = load_configured_translations(settings)
        summary = normalize_results_file(input_path, output_path, translations, settings)
    except (TallyError, OSError) as exc:
        logger.error("aggregation_failed", input=str(input_path), error=str(exc))
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Symbols found: {summary['symbols']}")
    typer.echo(f"Rows found: {summary['centers']}")


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
