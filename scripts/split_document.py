#!/usr/bin/env python3
"""Split a legal text document into numbered rows.

Reads a UTF-8 plain-text document (or stdin), splits it into clause numbers,
leading phrases, sub-clauses and plain lines, and writes the rows in one of
the export formats.

Usage:
    # JSON envelope on stdout
    python3 scripts/split_document.py act.txt

    # CSV without empty rows, written to a file
    python3 scripts/split_document.py act.txt --format csv --collapse-empty \
      --output out/act.csv

    # Pre-flight only: row forecast and document statistics
    python3 scripts/split_document.py act.txt --analyze

    # From stdin, settings from a config file
    cat act.txt | python3 scripts/split_document.py - --config splitter.json

Exit codes: 0 ok, 1 input/config error, 3 large document refused (use --force).
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from legal_splitter.config import EXPORT_FORMATS, SplitterConfig, load_config
from legal_splitter.core.pipeline import SegmentationPipeline
from legal_splitter.core.view import view_rows
from legal_splitter.export import export_rows
from legal_splitter.io_utils import (
    decode_text_document,
    dumps_json,
    read_text_document,
    write_text_output,
)

log = logging.getLogger("split_document")

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_LARGE_DOCUMENT = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a legal text document into numbered rows.",
    )
    parser.add_argument(
        "input",
        help="Path to a UTF-8 text document, or '-' to read stdin",
    )
    parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default=None,
        help="Output format (default: json, or export_format from --config)",
    )
    parser.add_argument(
        "--collapse-empty",
        action="store_true",
        default=None,
        help="Drop empty rows from the output (row numbers are kept)",
    )
    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Keep segment whitespace exactly as found",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="JSON file with splitter settings",
    )
    parser.add_argument(
        "--output", type=Path, default=None,
        help="Write output here instead of stdout",
    )
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Only print the row forecast and document statistics",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Split even when the forecast exceeds the large-document threshold",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return decode_text_document(sys.stdin.buffer.read())
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"input not found: {path}")
    return read_text_document(path)


def _resolve_config(args: argparse.Namespace) -> SplitterConfig:
    config = load_config(args.config)
    return config.with_overrides(
        export_format=args.format,
        collapse_empty=args.collapse_empty,
        normalize=False if args.no_normalize else None,
    )


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    write_text_output(text, output)
    log.info("wrote %s", output)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _resolve_config(args)
        text = _read_input(args.input)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    pipeline = SegmentationPipeline()

    if args.analyze:
        stats = pipeline.text_statistics(text)
        payload = asdict(stats)
        payload["is_large_document"] = (
            stats.analysis.estimated_rows > config.large_document_threshold
        )
        _emit(dumps_json(payload), args.output)
        return EXIT_OK

    estimated = pipeline.analyze(text).estimated_rows
    if estimated > config.large_document_threshold:
        log.warning(
            "document forecast is %d rows (threshold %d)",
            estimated, config.large_document_threshold,
        )
        if not args.force:
            print(
                "Error: document too large; re-run with --force to split anyway",
                file=sys.stderr,
            )
            return EXIT_LARGE_DOCUMENT

    rows = pipeline.generate_rows(text, normalize=config.normalize)
    shown = view_rows(rows, config.collapse_empty)
    log.debug("generated %d rows, showing %d", len(rows), len(shown))

    try:
        _emit(export_rows(shown, config.export_format), args.output)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
