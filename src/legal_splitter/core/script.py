"""Script detection and numeral conversion for Latin/Devanagari text.

Legal texts published bilingually mix ASCII and Devanagari numbering:
``5.``/``५.`` for clauses and ``5a.``/``५क.`` for inserted clauses. The
classifier answers three questions about a piece of text:

  classify          — which scripts occur in it
  language_of       — english | devanagari | mixed | other
  convert_numeral   — ASCII form of a Devanagari numeral ("१६ख" -> "16b")

Devanagari consonants used as clause suffixes map positionally onto the
Latin alphabet (क=a, ख=b, ..., य=z). The nasal ङ and ञ stay in the sequence
so that 26 consonants cover a..z exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from legal_splitter.core.types import LanguageTag, ScriptProfile

# ---------------------------------------------------------------------------
# Character tables
# ---------------------------------------------------------------------------

DEVANAGARI_DIGITS: str = "०१२३४५६७८९"

# 26 consonants, positional a..z. ऩ (U+0929) sits inside क..य but is skipped.
DEVANAGARI_SUFFIX_LETTERS: str = "कखगघङचछजझञटठडढणतथदधनपफबभमय"

_NUMERAL_TABLE: dict[int, str] = {
    **{ord(ch): str(i) for i, ch in enumerate(DEVANAGARI_DIGITS)},
    **{ord(ch): chr(ord("a") + i) for i, ch in enumerate(DEVANAGARI_SUFFIX_LETTERS)},
}

_LATIN_LETTER_RE = re.compile(r"[A-Za-z]")
_DEVANAGARI_GLYPH_RE = re.compile(r"[\u0900-\u097F]")
_DEVANAGARI_DIGIT_RE = re.compile(f"[{DEVANAGARI_DIGITS}]")


@dataclass(frozen=True, slots=True)
class ScriptClassifier:
    """Stateless Latin/Devanagari classifier.

    Held as a value so callers can inject it into the matcher, projector
    and pipeline instead of importing module state.
    """

    def classify(self, text: str) -> ScriptProfile:
        return ScriptProfile(
            has_latin_letter=bool(_LATIN_LETTER_RE.search(text)),
            has_devanagari_glyph=bool(_DEVANAGARI_GLYPH_RE.search(text)),
        )

    def language_of(self, text: str) -> LanguageTag:
        """Return the language tag for *text*; ``other`` when no script is present."""
        profile = self.classify(text)
        if profile.has_latin_letter and profile.has_devanagari_glyph:
            return "mixed"
        if profile.has_devanagari_glyph:
            return "devanagari"
        if profile.has_latin_letter:
            return "english"
        return "other"

    def convert_numeral(self, text: str) -> str:
        """Map Devanagari digits and suffix consonants to ASCII; pass the rest through."""
        return text.translate(_NUMERAL_TABLE)

    def has_devanagari(self, text: str) -> bool:
        return bool(_DEVANAGARI_GLYPH_RE.search(text))

    def has_devanagari_digits(self, text: str) -> bool:
        return bool(_DEVANAGARI_DIGIT_RE.search(text))

    def letter_suffix_of(self, numeral: str) -> str | None:
        """Return the trailing suffix letter of a numeral ("५क" -> "क", "16b" -> "b")."""
        if not numeral:
            return None
        last = numeral[-1]
        if last in DEVANAGARI_SUFFIX_LETTERS or ("a" <= last.lower() <= "z"):
            return last
        return None

    def base_number_of(self, numeral: str) -> str:
        """Strip a trailing suffix letter: "५क" -> "५", "३" -> "३"."""
        if self.letter_suffix_of(numeral) is not None:
            return numeral[:-1]
        return numeral


# ---------------------------------------------------------------------------
# Module-level conveniences
# ---------------------------------------------------------------------------

_DEFAULT = ScriptClassifier()


def classify(text: str) -> ScriptProfile:
    return _DEFAULT.classify(text)


def language_of(text: str) -> LanguageTag:
    return _DEFAULT.language_of(text)


def convert_numeral(text: str) -> str:
    return _DEFAULT.convert_numeral(text)
