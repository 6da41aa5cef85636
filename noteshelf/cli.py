"""CLI interface for noteshelf - build the notes index for the web client."""

import argparse
import logging
import sys

from openai import OpenAI

from noteshelf.config import Settings, get_settings
from noteshelf.indexer import (
    NoteAssembler,
    NoteEnricher,
    NotesIndex,
    NotesScanner,
    generate_index_summary,
)
from noteshelf.storage import IndexBuildError, NotesIndexStorage

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI."""
    logging.basicConfig(
        format="%(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )
    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def create_enricher(settings: Settings) -> NoteEnricher | None:
    """Create the enricher shared by every note, or None if enrichment is off."""
    if not settings.enrichment_enabled:
        if settings.enrich_notes:
            logger.info(
                f"{Colors.YELLOW}OPENAI_API_KEY not set, skipping AI metadata{Colors.RESET}"
            )
        return None

    client = OpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
    return NoteEnricher(client, model=settings.openai_model)


def build_index(settings: Settings) -> NotesIndex:
    """Scan, enrich and save the notes index.

    Raises:
        IndexBuildError: If the notes directory could not be scanned.
        OSError: If the index file could not be written.
    """
    assembler = NoteAssembler(settings.notes_dir, create_enricher(settings))
    scanner = NotesScanner(
        settings.notes_dir, assembler, include_hidden=settings.include_hidden
    )
    storage = NotesIndexStorage(settings.output_file)
    return storage.rebuild(scanner)


def print_summary(index: NotesIndex) -> None:
    for line in generate_index_summary(index):
        logger.info(line)


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="noteshelf",
        description="Build the JSON notes index from a directory of markdown notes.",
    )
    parser.add_argument(
        "--notes-dir",
        type=str,
        help="Directory of markdown notes (default: $NOTES_DIR or ./notes)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Where to write the index (default: $OUTPUT_FILE or ./public/notes-index.json)",
    )
    parser.add_argument(
        "--no-enrich",
        action="store_true",
        help="Skip AI-generated tags and descriptions",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary of the existing index and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    # Load settings
    try:
        settings = get_settings(
            notes_dir=args.notes_dir,
            output_file=args.output,
            enrich_notes=False if args.no_enrich else None,
        )
    except Exception as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        sys.exit(1)

    if args.summary:
        index = NotesIndexStorage(settings.output_file).load()
        if index is None:
            logger.error(f"{Colors.RED}No notes index at {settings.output_file}{Colors.RESET}")
            sys.exit(1)
        print_summary(index)
        return

    logger.info(f"{Colors.DIM}🔍 Scanning notes directory: {settings.notes_dir}{Colors.RESET}")

    try:
        index = build_index(settings)
    except IndexBuildError as e:
        logger.error(f"{Colors.RED}Error generating notes index: {e}{Colors.RESET}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"{Colors.RED}Failed to write notes index: {e}{Colors.RESET}")
        sys.exit(1)

    print_summary(index)
    logger.info(
        f"{Colors.GREEN}{Colors.BOLD}✓ Generated notes index: {settings.output_file}{Colors.RESET}"
    )


if __name__ == "__main__":
    cli()
