"""Tests for legal_splitter.core.view."""
from __future__ import annotations

from legal_splitter.core.pipeline import generate_rows
from legal_splitter.core.view import search_rows, select_rows, view_rows

ALTERNATING = "a\n\nb\n\nc\n\nd\n\ne"


class TestViewRows:
    def test_full_view_is_identity(self) -> None:
        rows = generate_rows(ALTERNATING)
        assert view_rows(rows, collapse_empty=False) == rows

    def test_full_view_is_a_copy(self) -> None:
        rows = generate_rows(ALTERNATING)
        shown = view_rows(rows, collapse_empty=False)
        shown.pop()
        assert len(rows) == 9

    def test_collapse_keeps_original_numbers(self) -> None:
        rows = generate_rows(ALTERNATING)
        shown = view_rows(rows, collapse_empty=True)
        assert [r.sequence_number for r in shown] == [1, 3, 5, 7, 9]
        assert [r.text for r in shown] == ["a", "b", "c", "d", "e"]

    def test_collapse_does_not_mutate_input(self) -> None:
        rows = generate_rows(ALTERNATING)
        before = list(rows)
        view_rows(rows, collapse_empty=True)
        assert rows == before

    def test_collapse_drops_whitespace_only_rows(self) -> None:
        rows = generate_rows("x\n   \ny", normalize=False)
        assert [r.text for r in view_rows(rows, collapse_empty=True)] == ["x", "y"]

    def test_collapse_of_empty_sequence(self) -> None:
        assert view_rows([], collapse_empty=True) == []


class TestSearchAndSelect:
    def test_search_is_case_insensitive(self) -> None:
        rows = generate_rows("1. Definitions: Act means\nplain act text\nother")
        found = search_rows(rows, "ACT")
        assert [r.text for r in found] == ["Act means", "plain act text"]

    def test_search_devanagari(self) -> None:
        rows = generate_rows("३. परिभाषाएँ: इस अधिनियम में")
        assert [r.sequence_number for r in search_rows(rows, "अधिनियम")] == [3]

    def test_select_in_sequence_order(self) -> None:
        rows = generate_rows(ALTERNATING)
        assert [r.text for r in select_rows(rows, [9, 1, 5, 42])] == ["a", "c", "e"]
