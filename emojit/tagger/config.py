"""Tagger configuration."""

from __future__ import annotations

from pydantic import Field

from emojit.common.config import BaseConfig


class TaggerConfig(BaseConfig):
    """Tagger configuration."""

    lexicon: str | None = Field(
        default=None,
        description="Lexicon JSON file mapping words to tags, pretrained nltk model when unset",
    )
    rules: str | None = Field(
        default=None,
        description="Transformation rules file, bundled rules when unset",
    )
    default_category: str = Field(
        default="N",
        description="Tag assigned to words the initial tagger cannot place",
        min_length=1,
    )
    download_model: bool = Field(
        default=True,
        description="Fetch the pretrained nltk model when it is not installed",
    )
