from __future__ import annotations

import logging
import re
from pathlib import Path

from .schemas import PLACEHOLDER, TitleRecord

logger = logging.getLogger(__name__)

GENRE_FIELD = 8
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
_INT_RE = re.compile(r"^[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*$")


def _field_int(fields: list[str], idx: int) -> int:
    """Integer at ``idx``, or 0 when missing, ``\\N``, malformed or out of int32 range."""
    if idx >= len(fields) or fields[idx] == PLACEHOLDER:
        return 0
    raw = fields[idx]
    if not _INT_RE.match(raw):
        return 0
    value = int(raw)
    if not (INT32_MIN <= value <= INT32_MAX):
        return 0
    return value


def parse_line(line: str) -> TitleRecord | None:
    fields = line.split("\t")
    if len(fields) <= GENRE_FIELD:
        return None
    return TitleRecord(
        show_id=fields[0],
        title_type=fields[1],
        primary_title=fields[2],
        original_title=fields[3],
        is_adult=fields[4] == "1",
        start_year=_field_int(fields, 5),
        end_year=_field_int(fields, 6),
        runtime_minutes=_field_int(fields, 7),
        genres=tuple(fields[GENRE_FIELD].split(",")),
    )


def parse_records(content: str) -> list[TitleRecord]:
    """Parse a ``title.basics`` style TSV payload into records.

    Empty lines are ignored, the first non-empty line is treated as the header
    and lines with fewer than nine fields are dropped. Never raises on bad rows.
    """
    records: list[TitleRecord] = []
    skipped = 0
    header_seen = False
    for line in content.split("\n"):
        if not line:
            continue
        if not header_seen:
            header_seen = True
            continue
        rec = parse_line(line)
        if rec is None:
            skipped += 1
            continue
        records.append(rec)
    logger.debug("Parsed %d catalog records (%d short lines skipped)", len(records), skipped)
    return records


def read_catalog_text(path: str | Path) -> str:
    """Read a catalog file in full; undecodable bytes become U+FFFD instead of failing the load."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Catalog file not found: {p}")
    with p.open("r", encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()
    logger.debug("Read %d characters from %s", len(content), p)
    return content
