"""Grammatical tagger package."""

from .component import GrammaticalTagger, LexiconTagger
from .config import TaggerConfig

__all__ = ["GrammaticalTagger", "LexiconTagger", "TaggerConfig"]
