"""Build a Note from frontmatter, extracted metadata and AI enrichment."""

import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from .enricher import NoteEnricher
from .extractors import extract_tags, extract_title, generate_excerpt
from .models import Note, NoteFrontmatter
from .parser import parse_frontmatter

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def generate_slug(folder: str, filename: str) -> str:
    """Stable lookup key, e.g. ("My Ideas", "First Note.md") -> "my-ideas/first-note"."""
    name = filename.removesuffix(MARKDOWN_SUFFIX)
    return re.sub(r"\s+", "-", f"{folder}/{name}".lower())


def generate_id(folder: str, filename: str) -> str:
    """Stable identifier, e.g. ("ideas", "first.md") -> "ideas-first-md"."""
    return re.sub(r"[^a-z0-9]", "-", f"{folder}-{filename}", flags=re.IGNORECASE).lower()


def format_timestamp(ts: float) -> str:
    """Format a POSIX timestamp as UTC ISO-8601 with milliseconds, e.g. 2024-01-02T03:04:05.000Z."""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_text(value: Any) -> str | None:
    """Coerce a frontmatter scalar to text; empty values count as missing."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def _as_tags(value: Any) -> list[str] | None:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return None
    tags = [str(t) for t in value if t is not None and str(t).strip()]
    return tags or None


class NoteAssembler:
    """Turns a markdown file into a Note.

    Frontmatter always wins; the enricher (optional) is consulted once per note.
    """

    def __init__(self, notes_dir: Path, enricher: NoteEnricher | None = None) -> None:
        self.notes_dir = notes_dir
        self.enricher = enricher

    def assemble(self, file_path: Path, folder: str, filename: str) -> Note:
        """Build the Note for one file.

        Raises:
            OSError: If the file cannot be read or stat'ed.
            UnicodeDecodeError: If the file is not UTF-8.
            FrontmatterError: If the frontmatter block is invalid.
        """
        raw = file_path.read_text(encoding="utf-8-sig")
        data, body = parse_frontmatter(raw)
        stats = file_path.stat()

        extracted_title = extract_title(body)
        extracted_tags = extract_tags(body)
        title = (
            _as_text(data.get("title"))
            or extracted_title
            or filename.removesuffix(MARKDOWN_SUFFIX)
        )

        ai_metadata = None
        if self.enricher is not None:
            ai_metadata = self.enricher.enrich(title, body, folder)

        ai_tags = ai_metadata.tags if ai_metadata and ai_metadata.tags else None
        ai_description = ai_metadata.description if ai_metadata else None

        modified = datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc)
        # st_birthtime only exists on macOS/BSD (and Windows on 3.12+)
        created_ts = getattr(stats, "st_birthtime", None) or stats.st_ctime

        frontmatter = NoteFrontmatter(
            title=title,
            date=_as_text(data.get("date")) or modified.strftime("%Y-%m-%d"),
            tags=_as_tags(data.get("tags")) or ai_tags or extracted_tags or None,
            category=_as_text(data.get("category")) or folder,
            author=_as_text(data.get("author")),
            description=_as_text(data.get("description")) or ai_description or None,
        )

        return Note(
            id=generate_id(folder, filename),
            slug=generate_slug(folder, filename),
            filepath=file_path.relative_to(self.notes_dir).as_posix(),
            folder=folder,
            filename=filename,
            frontmatter=frontmatter,
            content=body,
            excerpt=ai_description or generate_excerpt(body),
            created_at=format_timestamp(created_ts),
            modified_at=format_timestamp(stats.st_mtime),
        )
