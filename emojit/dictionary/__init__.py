"""Pictogram dictionary package."""

from .component import PictogramDictionary
from .config import DictionaryConfig
from .types import DictionaryEntry

__all__ = ["DictionaryConfig", "DictionaryEntry", "PictogramDictionary"]
