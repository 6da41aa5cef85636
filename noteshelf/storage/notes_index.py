"""Persistent storage for the notes index."""

import json
import logging
from pathlib import Path

from noteshelf.indexer.models import NotesIndex
from noteshelf.indexer.scanner import NotesScanner

logger = logging.getLogger(__name__)


class IndexBuildError(RuntimeError):
    """Raised when the notes directory could not be scanned at all."""


class NotesIndexStorage:
    """Writes the notes index JSON consumed by the client, and reads it back."""

    def __init__(self, output_file: Path) -> None:
        self.output_file = output_file

    def rebuild(self, scanner: NotesScanner) -> NotesIndex:
        """Scan the notes directory and replace the saved index.

        If the scan fails outright an empty index is still written, so the
        client never finds a missing or stale file.

        Raises:
            IndexBuildError: If the scan failed (after the empty index was saved).
        """
        try:
            index = scanner.scan()
        except Exception as e:
            logger.error(f"Error scanning notes directory: {e}")
            self.save(NotesIndex())
            raise IndexBuildError(f"Could not scan {scanner.notes_dir}: {e}") from e

        self.save(index)
        return index

    def save(self, index: NotesIndex) -> None:
        """Save index to disk, creating parent directories as needed."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        self.output_file.write_text(
            json.dumps(index.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.info(f"Saved notes index to {self.output_file}")

    def load(self) -> NotesIndex | None:
        """Load a previously saved index, or None if there is no usable file."""
        if not self.output_file.exists():
            return None

        try:
            data = json.loads(self.output_file.read_text(encoding="utf-8"))
            index = NotesIndex.from_dict(data)
            logger.debug(f"Loaded notes index ({len(index.notes)} notes)")
            return index
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Failed to load notes index: {e}")
            return None
