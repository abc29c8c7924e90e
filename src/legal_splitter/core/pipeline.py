"""Per-line segmentation of legal text into ordered row segments.

Every line is handled on its own, with no memory of earlier lines, using a
fixed precedence:

  empty       — blank line              -> [""]
  sub-clause  — "(a) ...", "(१) ..."    -> [line]           (never split)
  clause      — "5. Heading: body"      -> ["5.", "Heading:", "body"]
                "*16a. body"            -> ["*16a.", "body"]
                "१."                    -> ["१."]
  plain       — anything else           -> [line]

So each line yields one to three segments. The optional normalization pass
trims every segment and collapses runs of spaces.

The pipeline takes its ScriptClassifier, ClauseNumberMatcher and
LeadingPhraseExtractor as constructor fields; module-level helpers use a
default-built instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from legal_splitter.core.clause_number import ClauseNumberMatcher
from legal_splitter.core.leading_phrase import LeadingPhraseExtractor
from legal_splitter.core.normalization import normalize_line_endings, normalize_segment
from legal_splitter.core.rows import RowProjector
from legal_splitter.core.script import ScriptClassifier
from legal_splitter.core.types import (
    AMENDMENT_SYMBOLS,
    ClauseToken,
    LeadingPhrase,
    Row,
)

log = logging.getLogger(__name__)

LARGE_DOCUMENT_ROWS = 1000


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SplitAnalysis:
    """Row-count forecast computed without building the segment list."""

    total_lines: int
    non_empty_lines: int
    clause_count: int
    leading_phrase_count: int
    estimated_rows: int


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Document-level statistics shown before splitting."""

    analysis: SplitAnalysis
    average_line_length: float
    has_devanagari: bool
    has_amendments: bool
    character_count: int
    word_count: int


@dataclass(frozen=True, slots=True)
class _LinePlan:
    """How one line will be segmented."""

    kind: str                          # "empty" | "sub_clause" | "clause" | "plain"
    token: ClauseToken | None = None
    remainder: str = ""
    phrase: LeadingPhrase | None = None

    @property
    def segment_count(self) -> int:
        if self.kind != "clause":
            return 1
        if self.phrase is not None:
            return 3 if self.phrase.has_content else 2
        return 2 if self.remainder else 1


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SegmentationPipeline:
    """Stateless line-by-line segmenter with injected detectors.

    When no matcher is given, the default one is built around ``script`` so
    the whole pipeline shares a single classifier.
    """

    script: ScriptClassifier = field(default_factory=ScriptClassifier)
    matcher: ClauseNumberMatcher = None  # type: ignore[assignment]
    extractor: LeadingPhraseExtractor = field(default_factory=LeadingPhraseExtractor)

    def __post_init__(self) -> None:
        if self.matcher is None:
            object.__setattr__(self, "matcher", ClauseNumberMatcher(script=self.script))

    def _lines(self, text: object) -> list[str]:
        if not isinstance(text, str):
            log.debug("ignoring non-string input of type %s", type(text).__name__)
            return []
        if text == "":
            return []
        return normalize_line_endings(text).text.split("\n")

    def _plan(self, line: str) -> _LinePlan:
        if not line.strip():
            return _LinePlan(kind="empty")
        if self.matcher.is_sub_clause(line):
            return _LinePlan(kind="sub_clause")
        token = self.matcher.match(line)
        if token is None:
            return _LinePlan(kind="plain")
        remainder = line.lstrip()[token.end:].lstrip()
        return _LinePlan(
            kind="clause",
            token=token,
            remainder=remainder,
            phrase=self.extractor.extract(remainder),
        )

    def split_line(self, line: str) -> list[str]:
        """Segment one line (no line breaks expected) into 1-3 raw segments."""
        plan = self._plan(line)
        if plan.kind == "empty":
            return [""]
        if plan.token is None:
            return [line]

        segments = [plan.token.text]
        if plan.phrase is not None:
            segments.append(plan.phrase.phrase)
            if plan.phrase.content is not None:
                segments.append(plan.phrase.content)
        elif plan.remainder:
            segments.append(plan.remainder)
        return segments

    def split(self, text: object, *, normalize: bool = True) -> list[str]:
        """Split a whole document into ordered segments.

        Non-string input and the empty string give ``[]``. CRLF and CR line
        endings are rewritten to LF before splitting.
        """
        lines = self._lines(text)
        segments: list[str] = []
        for line in lines:
            segments.extend(self.split_line(line))
        if normalize:
            segments = [normalize_segment(s) for s in segments]
        log.debug("split %d lines into %d segments", len(lines), len(segments))
        return segments

    def generate_rows(self, text: object, *, normalize: bool = True) -> list[Row]:
        """Split *text* and project the segments into rows."""
        projector = RowProjector(script=self.script, matcher=self.matcher)
        return projector.project(self.split(text, normalize=normalize))

    def analyze(self, text: object) -> SplitAnalysis:
        """Forecast the row count of ``split(text)`` line by line.

        Only per-line plans are built, never the segment list, so this is
        safe to call on very large inputs before deciding to split them.
        """
        lines = self._lines(text)
        non_empty = 0
        clauses = 0
        phrases = 0
        rows = 0
        for line in lines:
            plan = self._plan(line)
            rows += plan.segment_count
            if plan.kind != "empty":
                non_empty += 1
            if plan.kind == "clause":
                clauses += 1
                if plan.phrase is not None:
                    phrases += 1
        return SplitAnalysis(
            total_lines=len(lines),
            non_empty_lines=non_empty,
            clause_count=clauses,
            leading_phrase_count=phrases,
            estimated_rows=rows,
        )

    def is_large_document(self, text: object, threshold: int = LARGE_DOCUMENT_ROWS) -> bool:
        if not isinstance(text, str) or not text:
            return False
        return self.analyze(text).estimated_rows > threshold

    def text_statistics(self, text: object) -> TextStatistics:
        analysis = self.analyze(text)
        body = text if isinstance(text, str) else ""
        return TextStatistics(
            analysis=analysis,
            average_line_length=(
                len(body) / analysis.total_lines if analysis.total_lines else 0.0
            ),
            has_devanagari=self.script.has_devanagari(body),
            has_amendments=any(sym in body for sym in AMENDMENT_SYMBOLS),
            character_count=len(body),
            word_count=len(body.split()),
        )


# ---------------------------------------------------------------------------
# Module-level conveniences
# ---------------------------------------------------------------------------

_DEFAULT = SegmentationPipeline()


def split_text(text: object, *, normalize: bool = True) -> list[str]:
    return _DEFAULT.split(text, normalize=normalize)


def generate_rows(text: object, *, normalize: bool = True) -> list[Row]:
    return _DEFAULT.generate_rows(text, normalize=normalize)


def analyze_splitting(text: object) -> SplitAnalysis:
    return _DEFAULT.analyze(text)


def is_large_document(text: object, threshold: int = LARGE_DOCUMENT_ROWS) -> bool:
    return _DEFAULT.is_large_document(text, threshold)


def text_statistics(text: object) -> TextStatistics:
    return _DEFAULT.text_statistics(text)
