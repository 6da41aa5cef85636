"""Frontmatter parsing for markdown notes."""

import re
from typing import Any

import yaml

# Opening "---" line, optional YAML, closing "---" line
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


class FrontmatterError(ValueError):
    """Raised when a delimited frontmatter block is not valid YAML metadata."""


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse frontmatter from note content.

    Returns (frontmatter_dict, body_content). A leading byte order mark is
    dropped; content without a complete delimited block is otherwise returned
    untouched with an empty dict.

    Raises:
        FrontmatterError: If the block is delimited but does not hold a YAML mapping.
    """
    content = content.removeprefix("\ufeff")

    if not content.startswith("---"):
        return {}, content

    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return {}, content

    body = content[match.end() :]
    raw = match.group(1) or ""

    try:
        frontmatter = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}") from e

    if frontmatter is None:
        return {}, body
    if not isinstance(frontmatter, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(frontmatter).__name__}"
        )

    return frontmatter, body
