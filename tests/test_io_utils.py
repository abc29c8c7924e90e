"""Tests for legal_splitter.io_utils."""
from __future__ import annotations

from pathlib import Path

from legal_splitter.io_utils import (
    decode_text_document,
    dumps_json,
    load_json,
    read_text_document,
    write_text_output,
)


class TestTextDocuments:
    def test_decode_drops_bom_and_replaces_bad_bytes(self) -> None:
        assert decode_text_document(b"\xef\xbb\xbf5. A\xff") == "5. A\ufffd"
        assert decode_text_document("धारा".encode()) == "धारा"

    def test_read_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "act.txt"
        path.write_text("१. नाम: विवरण\n", encoding="utf-8")
        assert read_text_document(path) == "१. नाम: विवरण\n"

    def test_bom_dropped(self, tmp_path: Path) -> None:
        path = tmp_path / "act.txt"
        path.write_bytes(b"\xef\xbb\xbf1. Title")
        assert read_text_document(path) == "1. Title"

    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "act.txt"
        path.write_bytes(b"1. A\xff B")
        assert read_text_document(path) == "1. A\ufffd B"

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "nested" / "rows.csv"
        write_text_output("Row Number,Text Content\n", path)
        assert path.read_text(encoding="utf-8") == "Row Number,Text Content\n"


class TestJson:
    def test_dumps_keeps_non_ascii(self) -> None:
        assert dumps_json({"text": "धारा"}, pretty=False) == '{"text":"धारा"}'

    def test_pretty_indent(self) -> None:
        assert dumps_json({"a": 1}) == '{\n  "a": 1\n}'

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text(dumps_json({"rows": [1, 2]}), encoding="utf-8")
        assert load_json(path) == {"rows": [1, 2]}
