"""Notes index data model, serialized in the shape the client reads."""

from dataclasses import dataclass, field


@dataclass
class NoteFrontmatter:
    """Resolved metadata for a note. Unset fields are left out of the JSON."""

    title: str | None = None
    date: str | None = None
    tags: list[str] | None = None
    category: str | None = None
    author: str | None = None
    description: str | None = None

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "date": self.date,
            "tags": self.tags,
            "category": self.category,
            "author": self.author,
            "description": self.description,
        }
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict) -> "NoteFrontmatter":
        return cls(
            title=data.get("title"),
            date=data.get("date"),
            tags=data.get("tags"),
            category=data.get("category"),
            author=data.get("author"),
            description=data.get("description"),
        )


@dataclass
class Note:
    """A single indexed note."""

    id: str
    slug: str
    filepath: str
    folder: str
    filename: str
    frontmatter: NoteFrontmatter
    content: str
    excerpt: str
    created_at: str
    modified_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "filepath": self.filepath,
            "folder": self.folder,
            "filename": self.filename,
            "frontmatter": self.frontmatter.to_dict(),
            "content": self.content,
            "excerpt": self.excerpt,
            "createdAt": self.created_at,
            "modifiedAt": self.modified_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Note":
        return cls(
            id=data["id"],
            slug=data["slug"],
            filepath=data["filepath"],
            folder=data["folder"],
            filename=data["filename"],
            frontmatter=NoteFrontmatter.from_dict(data.get("frontmatter", {})),
            content=data.get("content", ""),
            excerpt=data.get("excerpt", ""),
            created_at=data.get("createdAt", ""),
            modified_at=data.get("modifiedAt", ""),
        )


@dataclass
class Folder:
    """A directory and the notes directly inside it (not its subfolders')."""

    path: str
    notes: list[Note] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path

    @property
    def note_count(self) -> int:
        return len(self.notes)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "noteCount": self.note_count,
            "notes": [n.to_dict() for n in self.notes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Folder":
        return cls(
            path=data["path"],
            notes=[Note.from_dict(n) for n in data.get("notes", [])],
        )


@dataclass
class NotesIndex:
    """Complete index of a notes directory."""

    folders: list[Folder] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "folders": [f.to_dict() for f in self.folders],
            "notes": [n.to_dict() for n in self.notes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NotesIndex":
        return cls(
            folders=[Folder.from_dict(f) for f in data.get("folders", [])],
            notes=[Note.from_dict(n) for n in data.get("notes", [])],
        )
