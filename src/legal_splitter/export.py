"""Serializers for full or collapsed row sequences.

Formats:
  csv / tsv / psv  — "Row Number","Text Content" records, comma/tab/pipe
                     separated; fields are double-quoted only when they hold
                     the delimiter, a quote or a line break
  json             — metadata envelope plus one object per row
  text             — "Row N: text", empty rows as blank lines
  copy             — "Row N: text", empty rows keep their "Row N: " prefix
"""
from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from legal_splitter.core.rows import row_statistics, row_type
from legal_splitter.core.types import Row
from legal_splitter.io_utils import dumps_json

DELIMITERS: dict[str, str] = {"csv": ",", "tsv": "\t", "psv": "|"}
DELIMITED_HEADER: tuple[str, str] = ("Row Number", "Text Content")


def to_delimited(rows: Sequence[Row], delimiter: str = ",", *, header: bool = True) -> str:
    """Render rows as delimiter-separated records (comma, tab or pipe)."""
    if delimiter not in DELIMITERS.values():
        raise ValueError(f"Unsupported delimiter: {delimiter!r}")
    output = io.StringIO()
    writer = csv.writer(
        output,
        delimiter=delimiter,
        quotechar='"',
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    if header:
        writer.writerow(DELIMITED_HEADER)
    for row in rows:
        writer.writerow((row.sequence_number, row.text))
    return output.getvalue()


def row_to_dict(row: Row) -> dict[str, Any]:
    return {
        "number": row.sequence_number,
        "text": row.text,
        "isEmpty": row.is_empty,
        "type": row_type(row),
        "language": row.language,
    }


def build_json_envelope(
    rows: Sequence[Row],
    *,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """Metadata block (row count, timestamp, statistics) plus row objects."""
    stamp = generated_at or datetime.now(UTC)
    return {
        "metadata": {
            "totalRows": len(rows),
            "generatedAt": stamp.isoformat(),
            "statistics": row_statistics(rows).to_dict(),
        },
        "rows": [row_to_dict(row) for row in rows],
    }


def to_json(
    rows: Sequence[Row],
    *,
    generated_at: datetime | None = None,
    pretty: bool = True,
) -> str:
    return dumps_json(build_json_envelope(rows, generated_at=generated_at), pretty=pretty)


def to_text(rows: Sequence[Row]) -> str:
    return "\n".join("" if row.is_empty else f"Row {row.sequence_number}: {row.text}" for row in rows)


# ---------------------------------------------------------------------------
# Copy formatters
# ---------------------------------------------------------------------------

def format_rows_for_copy(rows: Sequence[Row]) -> str:
    lines = []
    for row in rows:
        if row.is_empty:
            lines.append(f"Row {row.sequence_number}: ")
        else:
            lines.append(f"Row {row.sequence_number}: {row.text}")
    return "\n".join(lines)


def format_plain_text(rows: Sequence[Row]) -> str:
    return "\n".join(row.text for row in rows)


def format_tab_separated(rows: Sequence[Row]) -> str:
    """Quick "N<TAB>text" lines with no quoting, for pasting into a sheet."""
    return "\n".join(f"{row.sequence_number}\t{row.text}" for row in rows)


def format_statistics(rows: Sequence[Row]) -> str:
    stats = row_statistics(rows)
    lines = [
        "=== SPLIT STATISTICS ===",
        f"Total Rows: {stats.total_rows}",
        f"Content Rows: {stats.content_rows}",
        f"Empty Rows: {stats.empty_rows}",
        f"Clause Numbers: {stats.clause_numbers}",
        f"Leading Phrases: {stats.leading_phrases}",
        f"Amendment Clauses: {stats.amendments}",
        "",
        "=== LANGUAGE BREAKDOWN ===",
        f"English: {stats.languages['english']}",
        f"Devanagari: {stats.languages['devanagari']}",
        f"Mixed: {stats.languages['mixed']}",
        "",
        "=== TEXT STATISTICS ===",
        f"Average Row Length: {stats.average_row_length:.2f} characters",
        f"Max Row Length: {stats.max_row_length} characters",
        f"Min Row Length: {stats.min_row_length} characters",
        f"Total Text Length: {stats.total_text_length} characters",
    ]
    return "\n".join(lines)


def export_rows(rows: Sequence[Row], fmt: str) -> str:
    """Dispatch on an export format name."""
    if fmt in DELIMITERS:
        return to_delimited(rows, DELIMITERS[fmt])
    if fmt == "json":
        return to_json(rows)
    if fmt == "text":
        return to_text(rows)
    if fmt == "copy":
        return format_rows_for_copy(rows)
    raise ValueError(f"Unknown export format: {fmt!r}")
