"""Notes indexing - parses, enriches and collects notes into an index."""

from .assembler import NoteAssembler, generate_id, generate_slug
from .enricher import NoteEnricher, NoteMetadata
from .models import Folder, Note, NoteFrontmatter, NotesIndex
from .parser import FrontmatterError, parse_frontmatter
from .scanner import NotesScanner
from .summary import generate_index_summary

__all__ = [
    "Folder",
    "FrontmatterError",
    "Note",
    "NoteAssembler",
    "NoteEnricher",
    "NoteFrontmatter",
    "NoteMetadata",
    "NotesIndex",
    "NotesScanner",
    "generate_id",
    "generate_index_summary",
    "generate_slug",
    "parse_frontmatter",
]
