"""Splitter configuration: defaults, JSON loading and validation."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from legal_splitter.core.pipeline import LARGE_DOCUMENT_ROWS
from legal_splitter.io_utils import load_json

EXPORT_FORMATS: tuple[str, ...] = ("json", "csv", "tsv", "psv", "text", "copy")


@dataclass(frozen=True, slots=True)
class SplitterConfig:
    """Settings shared by the CLI and library callers."""

    normalize: bool = True
    collapse_empty: bool = False
    large_document_threshold: int = LARGE_DOCUMENT_ROWS
    export_format: str = "json"

    def __post_init__(self) -> None:
        if self.large_document_threshold < 1:
            raise ValueError(
                "large_document_threshold must be >= 1, "
                f"got {self.large_document_threshold}",
            )
        if self.export_format not in EXPORT_FORMATS:
            raise ValueError(
                f"export_format must be one of {', '.join(EXPORT_FORMATS)}, "
                f"got {self.export_format!r}",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SplitterConfig:
        """Build a config from a mapping, rejecting unknown keys and bad types."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        defaults = cls()
        for key, value in data.items():
            expected = type(getattr(defaults, key))
            # bool is an int subclass; keep the two apart.
            if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
                raise ValueError(
                    f"Config key {key!r} must be {expected.__name__}, "
                    f"got {type(value).__name__}",
                )
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> SplitterConfig:
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def load_config(path: Path | None) -> SplitterConfig:
    """Load a JSON config file; ``None`` yields the defaults."""
    if path is None:
        return SplitterConfig()
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config payload in {path}")
    return SplitterConfig.from_dict(data)
