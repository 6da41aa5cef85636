"""Metadata extraction from note bodies, without any external calls."""

import re

# Maximum number of tags extracted from content
MAX_EXTRACTED_TAGS = 10

# Default excerpt length (chars), before the ellipsis
EXCERPT_LENGTH = 200

H1_PATTERN = re.compile(r"^#[ \t]+(\S.*)$")
H2_PATTERN = re.compile(r"^##[ \t]+(\S.*)$")
CODE_LANG_PATTERN = re.compile(r"```(\w+)")
HASHTAG_PATTERN = re.compile(r"(?<![\w#])#(\w+)")

# Fence languages that describe the note itself rather than a topic
IGNORED_CODE_LANGS = {"markdown", "md"}


def extract_title(content: str) -> str | None:
    """Return the first H1 heading, else the first H2 heading, else None."""
    h2_title = None

    for line in content.splitlines():
        h1_match = H1_PATTERN.match(line)
        if h1_match:
            return h1_match.group(1).strip()

        if h2_title is None:
            h2_match = H2_PATTERN.match(line)
            if h2_match:
                h2_title = h2_match.group(1).strip()

    return h2_title


def extract_tags(content: str, limit: int = MAX_EXTRACTED_TAGS) -> list[str]:
    """Extract tags from code fence languages and inline #hashtags.

    Code languages come first, then hashtags (lowercased), each in the order
    they appear. Duplicates are dropped and only the first `limit` are kept.
    """
    tags: list[str] = []

    for lang in CODE_LANG_PATTERN.findall(content):
        if lang not in IGNORED_CODE_LANGS and lang not in tags:
            tags.append(lang)

    for tag in HASHTAG_PATTERN.findall(content):
        tag = tag.lower()
        if tag not in tags:
            tags.append(tag)

    return tags[:limit]


def generate_excerpt(content: str, max_length: int = EXCERPT_LENGTH) -> str:
    """Build a plain-text excerpt, truncated with '...' past max_length."""
    text = re.sub(r"\A---.*?---", "", content, count=1, flags=re.DOTALL)  # Frontmatter
    text = re.sub(r"#{1,6}\s", "", text)  # Headings
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)  # Links
    text = re.sub(r"`{1,3}[^`]*`{1,3}", "", text)  # Code
    text = re.sub(r"[*_~]", "", text)  # Emphasis
    text = text.strip()

    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
