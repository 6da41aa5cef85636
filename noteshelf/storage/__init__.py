"""Persistent storage for the notes index."""

from .notes_index import IndexBuildError, NotesIndexStorage

__all__ = [
    "IndexBuildError",
    "NotesIndexStorage",
]
