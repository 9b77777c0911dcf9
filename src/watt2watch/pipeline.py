"""High level query helpers.

This module chains the :class:`~watt2watch.catalog.Catalog` filters for a
single :class:`~watt2watch.schemas.CatalogQuery` and turns the surviving
records into a pandas table, so the CLI (and tests) can exercise the whole
load -> filter -> tabulate flow in one call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from .catalog import Catalog, load_catalog_file
from .schemas import CatalogQuery, TitleRecord

logger = logging.getLogger(__name__)

COLUMNS = [
    "show_id",
    "title_type",
    "primary_title",
    "original_title",
    "is_adult",
    "start_year",
    "end_year",
    "runtime_minutes",
    "genres",
]


def apply_query(catalog: Catalog, query: CatalogQuery) -> list[TitleRecord]:
    """Run each filter set on ``query`` in turn, feeding results forward."""
    records: list[TitleRecord] | None = None
    if query.title_type is not None:
        records = catalog.filter_by_type(query.title_type)
    if query.start_year is not None:
        records = catalog.filter_by_year_range(query.start_year, query.end_year, records=records)
    if query.genres is not None:
        records = catalog.filter_by_genre(query.genres, records=records)
    if query.title is not None:
        records = catalog.filter_by_title(query.title, records=records)
    if query.min_runtime is not None:
        records = catalog.filter_by_duration(
            query.min_runtime, query.max_runtime, records=records
        )
    if records is None:
        records = list(catalog)
    logger.debug("Query %s matched %d records", query.model_dump(exclude_none=True), len(records))
    if query.limit is not None:
        records = records[: query.limit]
    return records


def records_to_frame(records: Iterable[TitleRecord]) -> pd.DataFrame:
    rows = []
    for rec in records:
        row = rec.model_dump()
        row["genres"] = ",".join(rec.genres)
        rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize_types(catalog: Catalog) -> pd.DataFrame:
    """Count records per raw title type, most common first."""
    df = records_to_frame(catalog)
    if df.empty:
        return pd.DataFrame({"title_type": [], "titles": [], "browsable": []})
    counts = df["title_type"].value_counts().rename_axis("title_type").reset_index(name="titles")
    browsable = {rec.title_type: rec.is_browsable for rec in catalog}
    counts["browsable"] = counts["title_type"].map(browsable)
    return counts


def run_query(
    catalog_path: str | Path,
    query: CatalogQuery | None = None,
    output_dir: str | Path | None = None,
) -> pd.DataFrame:
    """Load the catalog file, apply ``query`` and return the matches as a table.

    Parameters
    ----------
    catalog_path:
        Path to a UTF-8 ``title.basics`` style TSV file.
    query:
        Filters to apply. ``None`` returns every record.
    output_dir:
        Optional directory where the matches are written as ``results.csv``.

    Returns
    -------
    pd.DataFrame
        One row per matching record with the columns listed in ``COLUMNS``.
    """
    catalog = load_catalog_file(catalog_path)
    records = apply_query(catalog, query or CatalogQuery())
    df = records_to_frame(records)

    if output_dir:
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        df.to_csv(out / "results.csv", index=False)

    return df


__all__ = ["COLUMNS", "apply_query", "records_to_frame", "run_query", "summarize_types"]
