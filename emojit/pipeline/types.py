"""Pipeline type definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WordProfile:
    """Working record for one token as it moves through the pipeline."""

    word: str
    part_of_speech: str = ""
    plural: bool = False
    singular: str | None = None
    with_punc: str | None = None
    without_punc: str = ""
    emoji: str | None = None
