"""Tests for legal_splitter.export."""
from __future__ import annotations

from datetime import UTC, datetime

import orjson
import pytest

from legal_splitter.core.pipeline import generate_rows
from legal_splitter.core.view import view_rows
from legal_splitter.export import (
    build_json_envelope,
    export_rows,
    format_plain_text,
    format_rows_for_copy,
    format_statistics,
    format_tab_separated,
    row_to_dict,
    to_delimited,
    to_json,
    to_text,
)

DOC = '5. Definitions: "Act", rules | forms\tetc.\n\n*6a. Inserted.'


# ── Delimited ────────────────────────────────────────────────────────


class TestDelimited:
    def test_csv_header_and_quoting(self) -> None:
        out = to_delimited(generate_rows(DOC), ",")
        lines = out.split("\n")
        assert lines[0] == "Row Number,Text Content"
        assert lines[1] == "1,5."
        assert lines[2] == "2,Definitions:"
        assert lines[3] == '3,"""Act"", rules | forms\tetc."'
        assert lines[4] == "4,"
        assert lines[5] == "5,*6a."
        assert lines[6] == "6,Inserted."
        assert out.endswith("\n")

    def test_tsv_quotes_only_tab_fields(self) -> None:
        rows = generate_rows("plain, with comma\ntab\there")
        out = to_delimited(rows, "\t")
        assert out.split("\n")[1:3] == [
            "1\tplain, with comma",
            '2\t"tab\there"',
        ]

    def test_psv_quotes_pipe_fields(self) -> None:
        rows = generate_rows("a | b\nplain")
        out = to_delimited(rows, "|")
        assert out.split("\n")[1:3] == ['1|"a | b"', "2|plain"]

    def test_without_header(self) -> None:
        out = to_delimited(generate_rows("x"), ",", header=False)
        assert out == "1,x\n"

    def test_collapsed_view_keeps_numbers(self) -> None:
        rows = view_rows(generate_rows("a\n\nb"), collapse_empty=True)
        assert to_delimited(rows, ",").split("\n")[1:3] == ["1,a", "3,b"]

    def test_unsupported_delimiter(self) -> None:
        with pytest.raises(ValueError, match="Unsupported delimiter"):
            to_delimited(generate_rows("x"), ";")


# ── JSON ─────────────────────────────────────────────────────────────


class TestJson:
    def test_row_to_dict(self) -> None:
        rows = generate_rows("*6a. Inserted.")
        assert row_to_dict(rows[0]) == {
            "number": 1,
            "text": "*6a.",
            "isEmpty": False,
            "type": "amendment-clause",
            "language": "english",
        }
        assert row_to_dict(rows[1])["type"] == "content"

    def test_envelope(self) -> None:
        rows = generate_rows(DOC)
        stamp = datetime(2024, 1, 1, tzinfo=UTC)
        envelope = build_json_envelope(rows, generated_at=stamp)
        assert envelope["metadata"]["totalRows"] == 6
        assert envelope["metadata"]["generatedAt"] == "2024-01-01T00:00:00+00:00"
        assert envelope["metadata"]["statistics"]["emptyRows"] == 1
        assert [r["number"] for r in envelope["rows"]] == [1, 2, 3, 4, 5, 6]

    def test_to_json_parses_and_keeps_devanagari(self) -> None:
        rows = generate_rows("१. नाम: विवरण")
        out = to_json(rows)
        assert "विवरण" in out
        payload = orjson.loads(out)
        assert [r["text"] for r in payload["rows"]] == ["१.", "नाम:", "विवरण"]
        assert payload["rows"][1]["type"] == "leading-phrase"

    def test_compact_json(self) -> None:
        out = to_json(generate_rows("x"), pretty=False)
        assert "\n" not in out


# ── Text and copy formats ────────────────────────────────────────────


class TestTextFormats:
    def test_to_text_blank_for_empty_rows(self) -> None:
        out = to_text(generate_rows("a\n\nb"))
        assert out == "Row 1: a\n\nRow 3: b"

    def test_copy_keeps_prefix_for_empty_rows(self) -> None:
        out = format_rows_for_copy(generate_rows("a\n\nb"))
        assert out == "Row 1: a\nRow 2: \nRow 3: b"

    def test_plain_and_tab_separated(self) -> None:
        rows = generate_rows("5. Heading: body")
        assert format_plain_text(rows) == "5.\nHeading:\nbody"
        assert format_tab_separated(rows) == "1\t5.\n2\tHeading:\n3\tbody"

    def test_statistics_report(self) -> None:
        report = format_statistics(generate_rows(DOC))
        assert "Total Rows: 6" in report
        assert "Empty Rows: 1" in report
        assert "Clause Numbers: 2" in report
        assert "=== LANGUAGE BREAKDOWN ===" in report


# ── Dispatch ─────────────────────────────────────────────────────────


class TestExportRows:
    @pytest.mark.parametrize("fmt", ["json", "csv", "tsv", "psv", "text", "copy"])
    def test_every_format(self, fmt: str) -> None:
        assert export_rows(generate_rows("5. Heading: body"), fmt)

    def test_empty_document(self) -> None:
        assert export_rows([], "csv") == "Row Number,Text Content\n"
        assert orjson.loads(export_rows([], "json"))["rows"] == []

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown export format"):
            export_rows(generate_rows("x"), "xml")
