"""Segmentation core: script detection, clause matching, rows and views."""

from legal_splitter.core.clause_number import (
    ClauseNumberMatcher,
    ClauseOccurrence,
    clause_remainder,
    is_sub_clause,
    match_clause_number,
)
from legal_splitter.core.leading_phrase import (
    LeadingPhraseExtractor,
    extract_leading_phrase,
)
from legal_splitter.core.normalization import (
    NormalizedInput,
    normalize_line_endings,
    normalize_segment,
)
from legal_splitter.core.pipeline import (
    LARGE_DOCUMENT_ROWS,
    SegmentationPipeline,
    SplitAnalysis,
    TextStatistics,
    analyze_splitting,
    generate_rows,
    is_large_document,
    split_text,
    text_statistics,
)
from legal_splitter.core.rows import (
    RowProjector,
    RowStatistics,
    project_rows,
    row_statistics,
    row_type,
    validate_rows,
)
from legal_splitter.core.script import (
    ScriptClassifier,
    classify,
    convert_numeral,
    language_of,
)
from legal_splitter.core.types import (
    AMENDMENT_SYMBOLS,
    ClauseToken,
    DevanagariClause,
    EnglishClause,
    LanguageTag,
    LeadingPhrase,
    Row,
    RowType,
    ScriptProfile,
)
from legal_splitter.core.view import search_rows, select_rows, view_rows

__all__ = [
    "AMENDMENT_SYMBOLS",
    "LARGE_DOCUMENT_ROWS",
    "ClauseNumberMatcher",
    "ClauseOccurrence",
    "ClauseToken",
    "DevanagariClause",
    "EnglishClause",
    "LanguageTag",
    "LeadingPhrase",
    "LeadingPhraseExtractor",
    "NormalizedInput",
    "Row",
    "RowProjector",
    "RowStatistics",
    "RowType",
    "ScriptClassifier",
    "ScriptProfile",
    "SegmentationPipeline",
    "SplitAnalysis",
    "TextStatistics",
    "analyze_splitting",
    "classify",
    "clause_remainder",
    "convert_numeral",
    "extract_leading_phrase",
    "generate_rows",
    "is_large_document",
    "is_sub_clause",
    "language_of",
    "match_clause_number",
    "normalize_line_endings",
    "normalize_segment",
    "project_rows",
    "row_statistics",
    "row_type",
    "search_rows",
    "select_rows",
    "split_text",
    "text_statistics",
    "validate_rows",
    "view_rows",
]
