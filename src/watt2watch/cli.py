from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from .catalog import load_catalog_file
from .config import AppConfig
from .pipeline import apply_query, records_to_frame, summarize_types
from .schemas import CatalogQuery

app = typer.Typer(help="Browse a title.basics style catalog")


def _validate_path(catalog: str) -> None:
    """Ensure the catalog file exists and is readable."""
    file_path = Path(catalog)
    if not file_path.is_file():
        typer.echo(f"❌ catalog file not found: {catalog}", err=True)
        raise typer.Exit(1)
    try:
        with file_path.open("r"):
            pass
    except OSError as exc:  # pragma: no cover - defensive
        typer.echo(f"❌ cannot read catalog file: {exc}", err=True)
        raise typer.Exit(1) from exc


def _resolve_catalog(catalog: str | None, config: str | None) -> str:
    level = "WARNING"
    if config:
        try:
            cfg = AppConfig.from_file(config)
        except (OSError, ValueError) as exc:
            typer.echo(f"❌ {exc}", err=True)
            raise typer.Exit(1) from exc
        catalog = catalog or cfg.catalog_path
        level = cfg.log_level
    logging.basicConfig(level=level, format="%(message)s")
    if not catalog:
        typer.echo("❌ Provide --config or --catalog-file", err=True)
        raise typer.Exit(1)
    _validate_path(catalog)
    return catalog


@app.command()
def search(
    catalog: str | None = typer.Option(None, "--catalog-file", help="Path to catalog TSV file"),
    config: str | None = typer.Option(None, help="Path to config TOML file"),
    title_type: str | None = typer.Option(
        None, "--type", help="Exact titleType to keep (any raw value, e.g. tvEpisode)"
    ),
    start_year: int | None = typer.Option(None, help="Earliest start year (inclusive)"),
    end_year: int | None = typer.Option(None, help="Latest start year (inclusive)"),
    genre: list[str] | None = typer.Option(  # noqa: B008
        None, "--genre", help="Genre to match, case-insensitive (repeatable)"
    ),
    title: str | None = typer.Option(None, help="Substring of the primary or original title"),
    min_runtime: int | None = typer.Option(None, help="Minimum runtime in minutes"),
    max_runtime: int | None = typer.Option(None, help="Maximum runtime in minutes"),
    limit: int | None = typer.Option(None, help="Maximum number of titles to print"),
    export_csv: str | None = typer.Option(None, help="Export matches to CSV file"),
):
    """Search the catalog, chaining every filter that is given."""
    catalog = _resolve_catalog(catalog, config)

    try:
        query = CatalogQuery(
            title_type=title_type,
            start_year=start_year,
            end_year=end_year,
            genres=genre or None,
            title=title,
            min_runtime=min_runtime,
            max_runtime=max_runtime,
            limit=limit,
        )
    except ValidationError as exc:
        typer.echo(f"❌ invalid query: {exc.errors()[0]['msg']}", err=True)
        raise typer.Exit(1) from exc

    cat = load_catalog_file(catalog)
    records = apply_query(cat, query)

    if not records:
        typer.echo("❌ No titles matched")
        return

    typer.echo(f"\n🎬 {len(records)} matching titles:")
    typer.echo("=" * 80)
    for i, rec in enumerate(records, 1):
        year = rec.start_year or "?"
        runtime = f"{rec.runtime_minutes} min" if rec.runtime_minutes else "? min"
        genres = ", ".join(g for g in rec.genres if g)
        typer.echo(f"{i:2d}. {rec.primary_title} ({year}) [{rec.title_type}] {rec.show_id}")
        typer.echo(f"    ⏱ {runtime}  🎬 {genres}")

    if export_csv:
        records_to_frame(records).to_csv(export_csv, index=False)
        typer.echo(f"💾 Exported {len(records)} titles to {export_csv}")


@app.command()
def summary(
    catalog: str | None = typer.Option(None, "--catalog-file", help="Path to catalog TSV file"),
    config: str | None = typer.Option(None, help="Path to config TOML file"),
):
    """Show how many titles of each type the catalog holds."""
    catalog = _resolve_catalog(catalog, config)
    cat = load_catalog_file(catalog)

    typer.echo(f"\n📚 {len(cat)} titles in {catalog}")
    typer.echo("=" * 80)
    for row in summarize_types(cat).itertuples(index=False):
        marker = "" if row.browsable else "  (not browsable)"
        typer.echo(f"{row.title_type:>14}: {row.titles}{marker}")


if __name__ == "__main__":
    app()
