"""Read-only projections over a row sequence.

Numbering policy: a filtered view keeps each row's original
``sequence_number``. Collapsing empty rows out of 1..9 where 2, 4, 6, 8 are
empty yields rows numbered 1, 3, 5, 7, 9. Rows are never renumbered, so a
number always points back at the same row of the unfiltered sequence.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from legal_splitter.core.types import Row


def view_rows(rows: Sequence[Row], collapse_empty: bool) -> list[Row]:
    """Return the display projection of *rows*; the input is never mutated."""
    if not collapse_empty:
        return list(rows)
    return [row for row in rows if not row.is_empty]


def search_rows(rows: Sequence[Row], query: str) -> list[Row]:
    """Rows whose text contains *query*, case-insensitively."""
    needle = query.casefold()
    return [row for row in rows if needle in row.text.casefold()]


def select_rows(rows: Sequence[Row], numbers: Iterable[int]) -> list[Row]:
    """Rows whose sequence number is in *numbers*, in sequence order."""
    wanted = set(numbers)
    return [row for row in rows if row.sequence_number in wanted]
