"""Leading-phrase extraction from clause remainders.

Pattern: ``[clause]. [leading phrase]: [content]``. The phrase is the text
before the first colon of the remainder; it keeps its colon in the output
row. Only the first colon counts, so "Time: 5:30 pm" splits into "Time:" and
"5:30 pm".
"""

from __future__ import annotations

from dataclasses import dataclass

from legal_splitter.core.types import LeadingPhrase

_DEFINITION_PHRASE_MAX_WORDS = 10
_MINIMAL_CONTENT_CHARS = 10


@dataclass(frozen=True, slots=True)
class LeadingPhraseExtractor:
    """Splits a clause remainder into heading phrase and trailing content."""

    def extract(self, remainder: str | None) -> LeadingPhrase | None:
        if not remainder:
            return None
        colon = remainder.find(":")
        if colon < 0:
            return None
        phrase = remainder[:colon].strip()
        if not phrase:
            return None
        content = remainder[colon + 1:].strip()
        return LeadingPhrase(phrase=f"{phrase}:", content=content or None)

    def is_definition_phrase(self, phrase: str | None) -> bool:
        """Short colon-terminated headings ("Definitions:", "Short title:")."""
        if not phrase:
            return False
        return len(phrase.split()) <= _DEFINITION_PHRASE_MAX_WORDS and phrase.endswith(":")

    def has_minimal_content(self, remainder: str | None) -> bool:
        """A phrase is present but little or nothing follows its colon."""
        found = self.extract(remainder)
        if found is None:
            return False
        return found.content is None or len(found.content) < _MINIMAL_CONTENT_CHARS


_DEFAULT = LeadingPhraseExtractor()


def extract_leading_phrase(remainder: str | None) -> LeadingPhrase | None:
    return _DEFAULT.extract(remainder)
