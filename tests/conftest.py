"""Shared test fixtures."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest


@pytest.fixture
def tmp_notes(tmp_path: Path) -> Path:
    """Create a temporary notes directory with sample notes."""
    notes = tmp_path / "notes"
    notes.mkdir()

    # Root-level files are not indexed
    (notes / "README.md").write_text("# Readme\n\nNot a note.")

    ideas = notes / "ideas"
    ideas.mkdir()
    (ideas / "first.md").write_text("# Hello World\n\nSome text")
    (ideas / "second.md").write_text(
        "---\ntitle: Custom Title\ntags: [a, b]\nauthor: Sam\n---\n\n"
        "Second note about #python.\n\n```rust\nfn main() {}\n```\n"
    )

    drafts = ideas / "drafts"
    drafts.mkdir()
    (drafts / "Draft One.md").write_text("## Subheading only\n\nDraft body.")

    journal = notes / "journal"
    journal.mkdir()
    (journal / "2024-01-01.md").write_text("Plain entry with no heading.")
    (journal / "image.png").write_bytes(b"\x89PNG")

    (notes / "empty").mkdir()

    return notes


def _completion(content: str | None) -> Mock:
    """Build an object shaped like an OpenAI chat completion."""
    response = Mock()
    response.choices = [Mock(message=Mock(content=content))]
    return response


@pytest.fixture
def mock_client() -> Mock:
    """OpenAI client mock replying with valid metadata."""
    client = Mock()
    client.chat.completions.create.return_value = _completion(
        json.dumps(
            {
                "tags": ["Ideas", " Writing ", "", "drafts"],
                "description": "A short note about ideas.",
            }
        )
    )
    return client


@pytest.fixture
def sample_note_content() -> str:
    """Sample note content for testing."""
    return """---
title: Test Note
tags: [test, sample]
---

# Test Note

This is a test note with some content.

- [ ] Task 1
- [x] Task 2

#inline-tag
"""
