"""Deterministic normalization at the pipeline edges."""

from __future__ import annotations

import re
from dataclasses import dataclass


_MULTI_SPACE_RE = re.compile(r" {2,}")


@dataclass(frozen=True, slots=True)
class NormalizedInput:
    """Input text with line endings collapsed to LF."""

    raw_text: str
    text: str
    normalization_flags: dict[str, bool]

    @property
    def changed(self) -> bool:
        return any(self.normalization_flags.values())


def normalize_line_endings(text: str) -> NormalizedInput:
    """Normalize line endings and record which rewrites happened.

    Current deterministic transforms:
    1. Collapse CRLF to LF.
    2. Convert a lone CR to LF.

    Every other character, including tabs and zero-width marks, is kept.
    """

    raw = text or ""
    flags = {
        "crlf_normalized": "\r\n" in raw,
        "cr_normalized": False,
    }
    out = raw.replace("\r\n", "\n")
    if "\r" in out:
        flags["cr_normalized"] = True
        out = out.replace("\r", "\n")

    return NormalizedInput(raw_text=raw, text=out, normalization_flags=flags)


def normalize_segment(segment: str) -> str:
    """Trim a segment and collapse runs of two or more spaces to one.

    Only U+0020 runs are collapsed; tabs and embedded newlines are untouched.
    """
    return _MULTI_SPACE_RE.sub(" ", segment.strip())
