"""Projection of segments into classified rows, plus row-level summaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from legal_splitter.core.clause_number import ClauseNumberMatcher
from legal_splitter.core.script import ScriptClassifier
from legal_splitter.core.types import AMENDMENT_SYMBOLS, Row, RowType


@dataclass(frozen=True, slots=True)
class RowProjector:
    """Turns an ordered segment list into numbered, classified rows."""

    script: ScriptClassifier = field(default_factory=ScriptClassifier)
    matcher: ClauseNumberMatcher = field(default_factory=ClauseNumberMatcher)

    def project_one(self, sequence_number: int, text: str) -> Row:
        trimmed = text.strip()
        return Row(
            sequence_number=sequence_number,
            text=text,
            is_empty=trimmed == "",
            is_clause_number=self.matcher.is_full_clause_number(text),
            is_amendment=any(sym in text for sym in AMENDMENT_SYMBOLS),
            is_leading_phrase=trimmed.endswith(":"),
            language=self.script.language_of(text),
        )

    def project(self, segments: Sequence[str]) -> list[Row]:
        return [self.project_one(idx, seg) for idx, seg in enumerate(segments, start=1)]


def row_type(row: Row) -> RowType:
    """Export category; clause numbers outrank leading phrases."""
    if row.is_empty:
        return "empty"
    if row.is_clause_number:
        return "amendment-clause" if row.is_amendment else "clause-number"
    if row.is_leading_phrase:
        return "leading-phrase"
    return "content"


# ---------------------------------------------------------------------------
# Statistics and validation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RowStatistics:
    """Summary counts over a row sequence."""

    total_rows: int
    empty_rows: int
    content_rows: int
    clause_numbers: int
    leading_phrases: int
    amendments: int
    languages: dict[str, int]
    average_row_length: float
    total_text_length: int
    max_row_length: int
    min_row_length: int

    def to_dict(self) -> dict[str, object]:
        return {
            "totalRows": self.total_rows,
            "emptyRows": self.empty_rows,
            "contentRows": self.content_rows,
            "clauseNumbers": self.clause_numbers,
            "leadingPhrases": self.leading_phrases,
            "amendments": self.amendments,
            "languages": dict(self.languages),
            "averageRowLength": self.average_row_length,
            "totalTextLength": self.total_text_length,
            "maxRowLength": self.max_row_length,
            "minRowLength": self.min_row_length,
        }


def row_statistics(rows: Sequence[Row]) -> RowStatistics:
    lengths = [row.length for row in rows]
    languages = Counter(row.language for row in rows)
    empty = sum(1 for row in rows if row.is_empty)
    total_len = sum(lengths)
    return RowStatistics(
        total_rows=len(rows),
        empty_rows=empty,
        content_rows=len(rows) - empty,
        clause_numbers=sum(1 for row in rows if row.is_clause_number),
        leading_phrases=sum(1 for row in rows if row.is_leading_phrase),
        amendments=sum(1 for row in rows if row.is_amendment),
        languages={
            "english": languages["english"],
            "devanagari": languages["devanagari"],
            "mixed": languages["mixed"],
        },
        average_row_length=total_len / len(rows) if rows else 0.0,
        total_text_length=total_len,
        max_row_length=max(lengths, default=0),
        min_row_length=min(lengths, default=0),
    )


def validate_rows(rows: Sequence[Row]) -> list[str]:
    """Return numbering/text issues for an unfiltered row sequence; [] if clean."""
    issues: list[str] = []
    for idx, row in enumerate(rows, start=1):
        if row.sequence_number != idx:
            issues.append(
                f"row at position {idx} has sequence_number {row.sequence_number}",
            )
        if not isinstance(row.text, str):
            issues.append(f"row {row.sequence_number} text is not a string")
    return issues


_DEFAULT = RowProjector()


def project_rows(segments: Sequence[str]) -> list[Row]:
    return _DEFAULT.project(segments)
