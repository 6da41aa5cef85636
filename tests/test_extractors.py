"""Tests for frontmatter parsing, content extraction and sanitizing."""

import datetime

import pytest

from noteshelf.indexer.extractors import extract_tags, extract_title, generate_excerpt
from noteshelf.indexer.parser import FrontmatterError, parse_frontmatter
from noteshelf.indexer.sanitizer import sanitize_plain_text


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_parses_frontmatter_and_body(self, sample_note_content: str):
        frontmatter, body = parse_frontmatter(sample_note_content)

        assert frontmatter["title"] == "Test Note"
        assert frontmatter["tags"] == ["test", "sample"]
        assert body.startswith("\n# Test Note")
        assert "---" not in body

    def test_no_frontmatter(self):
        content = "# Just a heading\n\nBody."
        assert parse_frontmatter(content) == ({}, content)

    def test_unclosed_block_is_body(self):
        content = "---\ntitle: Broken\n\nNo closing delimiter."
        assert parse_frontmatter(content) == ({}, content)

    def test_empty_block(self):
        assert parse_frontmatter("---\n---\nBody") == ({}, "Body")

    def test_dates_parsed_by_yaml(self):
        frontmatter, _ = parse_frontmatter("---\ndate: 2024-03-05\n---\n")
        assert frontmatter["date"] == datetime.date(2024, 3, 5)

    def test_crlf_line_endings(self):
        frontmatter, body = parse_frontmatter("---\r\ntitle: Windows\r\n---\r\nBody")
        assert frontmatter == {"title": "Windows"}
        assert body == "Body"

    def test_horizontal_rule_is_not_a_delimiter(self):
        content = "----\ntitle: no\n----\nText"
        assert parse_frontmatter(content) == ({}, content)

    def test_byte_order_mark_stripped(self):
        frontmatter, body = parse_frontmatter("\ufeff---\ntitle: Real\n---\nBody")

        assert frontmatter == {"title": "Real"}
        assert body == "Body"

    def test_byte_order_mark_without_frontmatter(self):
        assert parse_frontmatter("\ufeff# Heading") == ({}, "# Heading")

    def test_invalid_yaml_raises(self):
        with pytest.raises(FrontmatterError, match="Invalid YAML"):
            parse_frontmatter("---\ntitle: [unclosed\n---\nBody")

    def test_non_mapping_raises(self):
        with pytest.raises(FrontmatterError, match="mapping"):
            parse_frontmatter("---\n- just\n- a list\n---\nBody")


class TestExtractTitle:
    """Tests for extract_title."""

    def test_first_h1(self):
        assert extract_title("intro\n# First\n# Second") == "First"

    def test_h1_preferred_over_earlier_h2(self):
        assert extract_title("## Sub\n\n# Main") == "Main"

    def test_falls_back_to_first_h2(self):
        assert extract_title("## One\n## Two") == "One"

    def test_hashtag_is_not_a_heading(self):
        assert extract_title("#tag line\nplain") is None

    def test_h3_ignored(self):
        assert extract_title("### Deep heading") is None

    def test_strips_trailing_whitespace(self):
        assert extract_title("#   Spaced title   \n") == "Spaced title"


class TestExtractTags:
    """Tests for extract_tags."""

    def test_code_languages(self):
        content = "```python\nx = 1\n```\n\n```bash\nls\n```"
        assert extract_tags(content) == ["python", "bash"]

    def test_markdown_fences_ignored(self):
        content = "```markdown\n# x\n```\n```md\ny\n```"
        assert extract_tags(content) == []

    def test_hashtags_lowercased(self):
        assert extract_tags("Working on #Python and #DataScience") == ["python", "datascience"]

    def test_adjacent_hashtags(self):
        assert extract_tags("#one #two #three") == ["one", "two", "three"]

    def test_headings_are_not_tags(self):
        assert extract_tags("# Title\n## Section\n### Deeper") == []

    def test_word_hash_is_not_tag(self):
        assert extract_tags("issue#42 and C# code") == []

    def test_unicode_hashtags_kept_whole(self):
        assert extract_tags("Recipes for #Café and #naïve cooks") == ["café", "naïve"]

    def test_deduplicated_in_discovery_order(self):
        content = "```python\n```\n#python #web #Web"
        assert extract_tags(content) == ["python", "web"]

    def test_capped_at_ten(self):
        content = " ".join(f"#tag{i}" for i in range(15))

        tags = extract_tags(content)
        assert len(tags) == 10
        assert tags[0] == "tag0"
        assert tags[-1] == "tag9"


class TestGenerateExcerpt:
    """Tests for generate_excerpt."""

    def test_strips_markdown(self):
        content = "# Title\n\nSee [the docs](https://example.com) for **bold** and `code`."
        assert generate_excerpt(content) == "Title\n\nSee the docs for bold and ."

    def test_short_text_untouched(self):
        assert generate_excerpt("Short text.") == "Short text."

    def test_truncates_with_ellipsis(self):
        excerpt = generate_excerpt("word " * 100)

        assert len(excerpt) == 203
        assert excerpt.endswith("...")

    def test_exact_length_not_truncated(self):
        content = "x" * 200
        assert generate_excerpt(content) == content

    def test_custom_length(self):
        assert generate_excerpt("abcdefghij", max_length=4) == "abcd..."

    def test_strips_leading_frontmatter(self):
        assert generate_excerpt("---\ntitle: x\n---\nBody") == "Body"


class TestSanitizePlainText:
    """Tests for sanitize_plain_text."""

    def test_empty(self):
        assert sanitize_plain_text("") == ""

    def test_removes_fenced_code_entirely(self):
        content = "Before\n\n```python\nsecret_code()\n```\n\nAfter"
        assert sanitize_plain_text(content) == "Before After"

    def test_single_line_output(self):
        content = "# Heading\n\n> A *quoted* [link](http://x.y)\n\n- `inline` item"
        assert sanitize_plain_text(content) == "Heading A quoted link - item"

    def test_only_code_gives_empty(self):
        assert sanitize_plain_text("```\nonly code\n```\n") == ""
