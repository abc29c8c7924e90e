"""Core types for script classification, clause tokens and rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, TypeAlias


LanguageTag: TypeAlias = Literal["english", "devanagari", "mixed", "other"]
NumeralScript: TypeAlias = Literal["english", "devanagari"]
RowType: TypeAlias = Literal[
    "empty", "amendment-clause", "clause-number", "leading-phrase", "content",
]

# Closed set of glyphs that mark inserted (amendment) clauses.
AMENDMENT_SYMBOLS: tuple[str, ...] = (
    "☑", "*", "†", "‡", "§", "¶", "•", "◆", "■", "▪", "▲", "►",
)


@dataclass(frozen=True, slots=True)
class ScriptProfile:
    """Which scripts occur anywhere in a piece of text."""

    has_latin_letter: bool
    has_devanagari_glyph: bool


@dataclass(frozen=True, slots=True)
class _ClauseTokenBase:
    """Fields shared by both clause-number variants."""

    text: str                      # Verbatim: "*16a.", "१.", "5 ."
    base_numeral: str              # Digits only: "16", "५"
    canonical_numeral: str         # ASCII form of numeral + suffix: "16a", "5a"
    amendment_symbol: str | None   # One of AMENDMENT_SYMBOLS
    letter_suffix: str | None      # "a", "क"
    end: int                       # Offset past the period in the left-trimmed line

    terminator: ClassVar[str] = "."

    def __post_init__(self) -> None:
        if not self.base_numeral:
            raise ValueError("base_numeral cannot be empty")
        if not self.text.endswith(self.terminator):
            raise ValueError(f"clause text must end with '.', got {self.text!r}")
        if self.amendment_symbol is not None and self.amendment_symbol not in AMENDMENT_SYMBOLS:
            raise ValueError(f"unknown amendment symbol {self.amendment_symbol!r}")
        if self.letter_suffix is not None and len(self.letter_suffix) != 1:
            raise ValueError("letter_suffix must be a single character")
        if self.end < len(self.text):
            raise ValueError("end must not precede the end of the clause text")

    @property
    def is_amendment(self) -> bool:
        """True for inserted clauses: an amendment glyph or a letter suffix."""
        return self.amendment_symbol is not None or self.letter_suffix is not None


@dataclass(frozen=True, slots=True)
class EnglishClause(_ClauseTokenBase):
    """Clause number written with ASCII digits, e.g. ``5.``, ``*16a.``."""

    numeral_script: ClassVar[NumeralScript] = "english"


@dataclass(frozen=True, slots=True)
class DevanagariClause(_ClauseTokenBase):
    """Clause number written with Devanagari digits, e.g. ``१.``, ``५क.``."""

    numeral_script: ClassVar[NumeralScript] = "devanagari"


ClauseToken: TypeAlias = EnglishClause | DevanagariClause


@dataclass(frozen=True, slots=True)
class LeadingPhrase:
    """Heading fragment found in a clause remainder."""

    phrase: str            # Trimmed, colon included: "Definitions:"
    content: str | None    # Trimmed text after the colon; None when empty

    @property
    def has_content(self) -> bool:
        return self.content is not None


@dataclass(frozen=True, slots=True)
class Row:
    """One atomic unit of segmented output."""

    sequence_number: int
    text: str
    is_empty: bool
    is_clause_number: bool
    is_amendment: bool
    is_leading_phrase: bool
    language: LanguageTag

    def __post_init__(self) -> None:
        if self.sequence_number < 1:
            raise ValueError(
                f"sequence_number must be >= 1, got {self.sequence_number}",
            )

    @property
    def length(self) -> int:
        return len(self.text)
