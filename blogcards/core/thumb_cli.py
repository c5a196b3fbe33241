"""
CLI helper to print the thumbnail derived from article content.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .thumbnail_extractor import ThumbnailExtractor


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Derive a thumbnail URL from article content."
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Content file (reads stdin when omitted or '-').",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show which strategy produced the thumbnail.",
    )
    return parser


def main() -> None:
    parser = create_parser()
    args = parser.parse_args()

    try:
        content = _read_content(args.input)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    candidate = ThumbnailExtractor().extract_candidate(content)
    if not candidate.found:
        print("No thumbnail found", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Source: {candidate.source.value}")
    print(candidate.url)


def _read_content(source: str) -> str:
    if not source or source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    main()
