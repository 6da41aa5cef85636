"""Reduce markdown to single-line prose for the enrichment prompt."""

import re


def sanitize_plain_text(content: str) -> str:
    """Strip markdown syntax and collapse whitespace.

    Fenced code blocks are removed with their contents, links keep only
    their text. Empty input gives an empty string.
    """
    if not content:
        return ""

    text = re.sub(r"\A---.*?---", "", content, count=1, flags=re.DOTALL)
    text = re.sub(r"```.*?```", "", text, flags=re.DOTALL)
    text = re.sub(r"`[^`]*`", "", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)
    text = re.sub(r"#+\s", "", text)
    text = re.sub(r"[*_~>]", "", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()
