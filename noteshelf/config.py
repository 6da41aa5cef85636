"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Notes
    notes_dir: Path = Path("notes")
    output_file: Path = Path("public/notes-index.json")
    include_hidden: bool = True

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    enrich_notes: bool = True
    request_timeout: float = 30.0
    max_retries: int = 2

    @property
    def enrichment_enabled(self) -> bool:
        """Enrichment runs only when switched on and an API key is available."""
        return self.enrich_notes and bool(self.openai_api_key)

    @field_validator("notes_dir", "output_file")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure every OpenAI call is bounded."""
        if v <= 0:
            raise ValueError(f"Request timeout must be positive: {v}")
        return v

    @field_validator("max_retries")
    @classmethod
    def validate_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Max retries cannot be negative: {v}")
        return v


def get_settings(**overrides) -> Settings:
    """Load settings from environment, with explicit overrides taking precedence."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
