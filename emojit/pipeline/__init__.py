"""Word-to-pictogram translation pipeline."""

from .config import TranslatorConfig
from .translator import Translator, initialize, translate
from .types import WordProfile

__all__ = ["Translator", "TranslatorConfig", "WordProfile", "initialize", "translate"]
