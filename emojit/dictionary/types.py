"""Dictionary type definitions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DictionaryEntry(BaseModel):
    """A single pictogram with its canonical key and keyword synonyms."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Canonical lookup word")
    char: str = Field(..., min_length=1, description="Pictogram character(s)")
    category: str = Field(default="", description="Category label")
    keywords: tuple[str, ...] = Field(default=(), description="Ordered keyword synonyms")

    @classmethod
    def from_lib(cls, key: str, item: dict[str, Any]) -> DictionaryEntry:
        """Create an entry from an emojilib-style record."""
        return cls(
            key=key,
            char=item.get("char") or "",
            category=item.get("category") or "",
            keywords=item.get("keywords") or (),
        )

    def flagged(self, markers: frozenset[str]) -> bool:
        """Check whether any keyword is one of the given markers."""
        return any(keyword in markers for keyword in self.keywords)
