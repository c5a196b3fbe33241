"""
CLI interface for blogcards
"""
import argparse
import logging
import sys
from pathlib import Path

from .config import Settings
from .listing import BlogListing


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser"""
    parser = argparse.ArgumentParser(
        description="Render a blog listing page with derived thumbnails"
    )

    parser.add_argument(
        "source",
        nargs="?",
        help="Blog API base URL or saved posts JSON file (defaults to configured API)"
    )

    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number to render"
    )

    parser.add_argument(
        "--limit",
        type=int,
        help="Posts per page"
    )

    parser.add_argument(
        "--output", "-o",
        help="Output markdown file path"
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print markdown instead of saving"
    )

    parser.add_argument(
        "--check-images",
        action="store_true",
        help="Probe extracted thumbnails and apply the fallback policy"
    )

    parser.add_argument(
        "--config",
        help="YAML settings file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def main():
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args()

    try:
        settings = _load_settings(args)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if args.verbose:
            raise
        sys.exit(1)

    _configure_logging(settings.log_level, args.verbose)

    try:
        listing_builder = BlogListing(settings=settings)
        source = (args.source or "").strip()

        if args.verbose:
            print(f"Source: {source or settings.api_base_url}")
            print(f"Page: {args.page}")
            print(f"Page size: {args.limit or settings.page_size}")
            print(f"Check images: {settings.check_images}")

        if source and not _looks_like_url(source):
            listing = listing_builder.build_from_file(source)
        else:
            listing = listing_builder.build(page=args.page, limit=args.limit)

        if args.preview:
            print(listing.to_markdown())
            return

        output_path = args.output or str(_default_output_path(listing.page_state.current_page))
        listing.save_markdown(output_path)
        print(f"Markdown generated: {output_path}")
        print(f"Cards: {len(listing.cards)}")
        print(f"Page: {listing.page_state.current_page}/{listing.page_state.total_pages}")
    except Exception as exc:
        if args.verbose:
            raise
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_yaml(args.config) if args.config else Settings()

    overrides = {}
    if args.source and _looks_like_url(args.source):
        overrides["api_base_url"] = args.source.strip()
    if args.limit is not None:
        overrides["page_size"] = args.limit
    if args.check_images:
        overrides["check_images"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _looks_like_url(value: str) -> bool:
    return value.strip().startswith(("http://", "https://"))


def _default_output_path(page: int) -> Path:
    output_dir = Path("outputs")
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir / f"blog-page-{page}.md"


if __name__ == "__main__":
    main()
