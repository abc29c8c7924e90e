"""Clause-number matching for English and Devanagari numbering.

A clause number is the leading structural marker of a provision:

  english     — 5.   16a.   *16a.   † 3.   12 .
  devanagari  — १.   ५क.    *१६ख.

Both shapes allow one optional amendment glyph (see AMENDMENT_SYMBOLS) and
whitespace before the numeral and before the period. A letter suffix must
touch the last digit ("5a." is a clause, "5 a." is not). A bare number
without the period is never a clause.

Sub-clauses such as (a), (iv), (१), (क) take precedence: a line that opens
with a parenthesised label is never a main clause, whatever follows it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from legal_splitter.core.script import (
    DEVANAGARI_DIGITS,
    DEVANAGARI_SUFFIX_LETTERS,
    ScriptClassifier,
)
from legal_splitter.core.types import (
    AMENDMENT_SYMBOLS,
    ClauseToken,
    DevanagariClause,
    EnglishClause,
)

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

_SYMBOL_CLASS = "[" + re.escape("".join(AMENDMENT_SYMBOLS)) + "]"

# Applied to the left-trimmed line. Groups: symbol, digits, suffix.
_ENGLISH_CLAUSE_RE = re.compile(
    rf"^({_SYMBOL_CLASS})?\s*([0-9]+)([A-Za-z])?\s*\.",
)
_DEVANAGARI_CLAUSE_RE = re.compile(
    rf"^({_SYMBOL_CLASS})?\s*([{DEVANAGARI_DIGITS}]+)([{DEVANAGARI_SUFFIX_LETTERS}])?\s*\.",
)

# (1), (a), (IV), (क), (१) ... Devanagari letters span क..य here.
_SUB_CLAUSE_RE = re.compile(rf"^\([0-9A-Za-zक-य{DEVANAGARI_DIGITS}]+\)")

_CLAUSE_SHAPES: tuple[tuple[re.Pattern[str], type[EnglishClause] | type[DevanagariClause]], ...] = (
    (_ENGLISH_CLAUSE_RE, EnglishClause),
    (_DEVANAGARI_CLAUSE_RE, DevanagariClause),
)


@dataclass(frozen=True, slots=True)
class ClauseOccurrence:
    """A clause token found while scanning a whole document."""

    line_index: int     # 0-based line within the document
    token: ClauseToken


@dataclass(frozen=True, slots=True)
class ClauseNumberMatcher:
    """Detects leading clause numbers and separates them from sub-clauses."""

    script: ScriptClassifier = field(default_factory=ScriptClassifier)

    def is_sub_clause(self, line: str) -> bool:
        return bool(_SUB_CLAUSE_RE.match(line.lstrip()))

    def match(self, line: str) -> ClauseToken | None:
        """Return the clause token opening *line*, or None.

        Sub-clause shape is checked first so that "(1). text" or "(a) 5."
        never yields a main clause.
        """
        if not line or not line.strip():
            return None
        trimmed = line.lstrip()
        if _SUB_CLAUSE_RE.match(trimmed):
            return None

        for pattern, variant in _CLAUSE_SHAPES:
            m = pattern.match(trimmed)
            if m is None:
                continue
            symbol, digits, suffix = m.group(1), m.group(2), m.group(3)
            return variant(
                text=m.group(0),
                base_numeral=digits,
                canonical_numeral=self.script.convert_numeral(digits + (suffix or "")),
                amendment_symbol=symbol,
                letter_suffix=suffix,
                end=m.end(),
            )
        return None

    def remainder(self, line: str) -> str | None:
        """Left-trimmed text after the clause period; None if empty or no clause."""
        token = self.match(line)
        if token is None:
            return None
        rest = line.lstrip()[token.end:].lstrip()
        return rest or None

    def is_full_clause_number(self, text: str) -> bool:
        """True when *text* is a clause number and nothing else ("5a." but not "5. x")."""
        token = self.match(text)
        if token is None:
            return False
        return text.strip()[token.end:].strip() == ""

    def clause_type(self, line: str) -> str | None:
        """Return ``amendment`` or ``regular`` for clause lines, None otherwise."""
        token = self.match(line)
        if token is None:
            return None
        return "amendment" if token.is_amendment else "regular"

    def extract_all(self, text: str) -> list[ClauseOccurrence]:
        """Scan every line of *text* and return its clause tokens in order."""
        found: list[ClauseOccurrence] = []
        for idx, line in enumerate(text.split("\n")):
            token = self.match(line)
            if token is not None:
                found.append(ClauseOccurrence(line_index=idx, token=token))
        return found


# ---------------------------------------------------------------------------
# Module-level conveniences
# ---------------------------------------------------------------------------

_DEFAULT = ClauseNumberMatcher()


def match_clause_number(line: str) -> ClauseToken | None:
    return _DEFAULT.match(line)


def clause_remainder(line: str) -> str | None:
    return _DEFAULT.remainder(line)


def is_sub_clause(line: str) -> bool:
    return _DEFAULT.is_sub_clause(line)
