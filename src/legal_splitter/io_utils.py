"""I/O utilities for text documents and JSON payloads.

JSON goes through orjson; text documents are read as UTF-8.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def decode_text_document(raw: bytes) -> str:
    """Decode document bytes as UTF-8.

    A leading BOM is dropped and undecodable bytes become U+FFFD, so a
    mis-encoded file or pipe still reaches the splitter as a string.
    """
    return raw.decode("utf-8-sig", errors="replace")


def read_text_document(path: Path) -> str:
    """Read a plain-text document as UTF-8."""
    return decode_text_document(path.read_bytes())


def write_text_output(text: str, path: Path) -> None:
    """Write *text* as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def dumps_json(obj: Any, *, pretty: bool = True) -> str:
    """Serialize to a JSON string; non-ASCII text is kept as-is."""
    opts = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(obj, option=opts).decode("utf-8")


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())

