"""Dictionary configuration."""

from __future__ import annotations

from pydantic import Field

from emojit.common.config import BaseConfig


class DictionaryConfig(BaseConfig):
    """Dictionary configuration."""

    path: str | None = Field(
        default=None,
        description="Custom dictionary JSON file, bundled dictionary when unset",
    )
    excluded_keywords: list[str] = Field(
        default_factory=lambda: ["kanji"],
        description="Entries carrying any of these keywords are never matched",
    )
    emoji_data: bool = Field(
        default=True,
        description="Append every emoji known to the emoji library after the file entries",
    )
