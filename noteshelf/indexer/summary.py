"""Generate text summaries of a notes index for run reports."""

from .models import Folder, NotesIndex


def generate_index_summary(index: NotesIndex, max_tags: int = 10) -> list[str]:
    """Build the report lines logged after a build.

    Covers folder and note counts, one line per folder, and the most used tags.
    """
    lines = [
        f"Found {len(index.folders)} folders",
        f"Found {len(index.notes)} notes",
    ]

    for folder in index.folders:
        lines.append(_folder_line(folder))

    tag_counts = _count_tags(index)
    if tag_counts:
        top_tags = sorted(tag_counts.items(), key=lambda x: (-x[1], x[0]))[:max_tags]
        tag_str = ", ".join(f"#{tag} ({count})" for tag, count in top_tags)
        lines.append(f"Top tags: {tag_str}")

    return lines


def _folder_line(folder: Folder) -> str:
    if not folder.note_count:
        return f"  📁 {folder.name}: no notes"
    noun = "note" if folder.note_count == 1 else "notes"
    return f"  📁 {folder.name}: {folder.note_count} {noun}"


def _count_tags(index: NotesIndex) -> dict[str, int]:
    counts: dict[str, int] = {}
    for note in index.notes:
        for tag in note.frontmatter.tags or []:
            counts[tag] = counts.get(tag, 0) + 1
    return counts
