"""Translator configuration."""

from __future__ import annotations

from pydantic import Field

from emojit.common.config import BaseConfig

DEFAULT_EXCLUDED_TAGS = ["VB", "PRP$", "RB", "TO", "VBZ", "DT"]


class TranslatorConfig(BaseConfig):
    """Translation pipeline configuration."""

    excluded_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_TAGS),
        description="Grammatical tags whose words are never replaced",
    )
