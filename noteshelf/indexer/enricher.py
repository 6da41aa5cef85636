"""LLM-powered tag and description generation for notes."""

import json
import logging
from dataclasses import dataclass, field

from openai import OpenAI

from .sanitizer import sanitize_plain_text

logger = logging.getLogger(__name__)

# Model to use for enrichment (fast and cheap)
ENRICHER_MODEL = "gpt-4o-mini"

# Maximum sanitized content length to send (chars)
MAX_CONTENT_LENGTH = 4000

# Maximum number of tags kept from a reply
MAX_TAGS = 8

ENRICH_PROMPT = """\
You are helping build metadata for a personal notes app.
Return JSON only with keys: tags (array of 4-8 short lowercase tags), description (1 sentence, <=160 chars).
Use the note title and content. Avoid generic tags like "note" or "personal".

Title: {title}
Folder: {folder}
Content: {content}
"""


@dataclass
class NoteMetadata:
    """Result of enriching a note."""

    tags: list[str] = field(default_factory=list)
    description: str = ""


def parse_metadata_reply(raw_text: str) -> NoteMetadata | None:
    """Parse a model reply into NoteMetadata.

    Returns None when the reply holds neither tags nor a description.

    Raises:
        json.JSONDecodeError: If no JSON object can be decoded from the reply.
        ValueError: If the decoded JSON is not an object.
    """
    # Decode the object starting at the first "{", ignoring any text after it
    start = raw_text.find("{")
    if start == -1:
        result = json.loads(raw_text)
    else:
        result, _ = json.JSONDecoder().raw_decode(raw_text, start)

    if not isinstance(result, dict):
        raise ValueError(f"Expected a JSON object, got {type(result).__name__}")

    raw_tags = result.get("tags")
    tags = []
    if isinstance(raw_tags, list):
        tags = [t.lower().strip() for t in raw_tags if isinstance(t, str)]
        tags = [t for t in tags if t][:MAX_TAGS]

    description = result.get("description")
    description = description.strip() if isinstance(description, str) else ""

    if not tags and not description:
        return None

    return NoteMetadata(tags=tags, description=description)


class NoteEnricher:
    """Generates tags and a short description for notes using OpenAI."""

    def __init__(
        self,
        client: OpenAI,
        model: str = ENRICHER_MODEL,
        max_content_length: int = MAX_CONTENT_LENGTH,
    ) -> None:
        self.client = client
        self.model = model
        self.max_content_length = max_content_length

    def enrich(self, title: str, content: str, folder: str) -> NoteMetadata | None:
        """Generate metadata for a note.

        Args:
            title: Resolved note title
            content: The note body (markdown)
            folder: Folder the note lives in, for context

        Returns:
            NoteMetadata with tags and description, or None if skipped or failed
        """
        text = sanitize_plain_text(content)
        if not text:
            return None

        prompt = ENRICH_PROMPT.format(
            title=title,
            folder=folder,
            content=text[: self.max_content_length],
        )

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "system",
                        "content": "You generate concise note metadata. Always respond with valid JSON.",
                    },
                    {"role": "user", "content": prompt},
                ],
                temperature=0.3,
                max_tokens=300,
                response_format={"type": "json_object"},
            )

            raw_text = (response.choices[0].message.content or "").strip()
            if not raw_text:
                return None

            return parse_metadata_reply(raw_text)

        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse metadata JSON for '{title}': {e}")
            return None
        except Exception as e:
            logger.warning(f"AI metadata generation failed for '{title}': {e}")
            return None
