"""Notes scanner - walks the notes directory and builds the index."""

import logging
from pathlib import Path

from .assembler import MARKDOWN_SUFFIX, NoteAssembler
from .models import Folder, Note, NotesIndex
from .parser import FrontmatterError

logger = logging.getLogger(__name__)


class NotesScanner:
    """Scans a notes directory and builds a NotesIndex.

    Every directory below the root becomes its own Folder holding only the
    notes directly inside it. Files in the root itself are not indexed, and
    symlinked directories are not followed.
    """

    def __init__(
        self,
        notes_dir: Path,
        assembler: NoteAssembler,
        include_hidden: bool = True,
    ) -> None:
        self.notes_dir = notes_dir
        self.assembler = assembler
        self.include_hidden = include_hidden

    def scan(self) -> NotesIndex:
        """Perform a full scan of the notes directory.

        Raises:
            OSError: If the root directory cannot be listed.
        """
        logger.info(f"Scanning notes directory: {self.notes_dir}")

        folders: list[Folder] = []
        notes: list[Note] = []

        # The root must be readable; failures below it are skipped
        for entry in sorted(self.notes_dir.iterdir()):
            if self._is_walkable(entry):
                self._walk(entry, folders, notes)

        folders.sort(key=lambda f: f.path)
        for folder in folders:
            folder.notes.sort(key=lambda n: n.filename)
        notes.sort(key=lambda n: (n.folder, n.filename))

        index = NotesIndex(folders=folders, notes=notes)
        self._drop_duplicate_slugs(index)

        logger.info(f"Indexed {len(index.notes)} notes in {len(index.folders)} folders")
        return index

    def _is_walkable(self, entry: Path) -> bool:
        # Symlinked directories are never followed
        if entry.is_symlink() or not entry.is_dir():
            return False
        return self.include_hidden or not entry.name.startswith(".")

    def _walk(self, directory: Path, folders: list[Folder], notes: list[Note]) -> None:
        """Index one directory, then recurse into its subdirectories."""
        folder_path = directory.relative_to(self.notes_dir).as_posix()

        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.warning(f"Could not read folder {folder_path}: {e}")
            return

        folder = Folder(path=folder_path)
        subdirectories: list[Path] = []

        for entry in entries:
            if entry.is_dir():
                if self._is_walkable(entry):
                    subdirectories.append(entry)
            elif entry.name.endswith(MARKDOWN_SUFFIX):
                note = self._scan_note(entry, folder_path)
                if note is not None:
                    folder.notes.append(note)
                    notes.append(note)

        folders.append(folder)
        logger.debug(f"  {folder_path}: {folder.note_count} notes")

        for subdirectory in subdirectories:
            self._walk(subdirectory, folders, notes)

    def _scan_note(self, file_path: Path, folder_path: str) -> Note | None:
        """Assemble a single note, skipping files that cannot be indexed."""
        try:
            return self.assembler.assemble(file_path, folder_path, file_path.name)
        except FrontmatterError as e:
            logger.warning(f"Skipping {folder_path}/{file_path.name}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {folder_path}/{file_path.name}: {e}")
        return None

    def _drop_duplicate_slugs(self, index: NotesIndex) -> None:
        """Keep only the first note (in sorted order) for each slug."""
        seen: set[str] = set()
        kept: list[Note] = []

        for note in index.notes:
            if note.slug in seen:
                logger.warning(f"Duplicate slug '{note.slug}', skipping {note.filepath}")
                continue
            seen.add(note.slug)
            kept.append(note)

        if len(kept) == len(index.notes):
            return

        # Note ids can collide as well, so match on the objects themselves
        kept_refs = {id(n) for n in kept}
        index.notes = kept
        for folder in index.folders:
            folder.notes = [n for n in folder.notes if id(n) in kept_refs]
