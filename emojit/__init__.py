"""Word-to-pictogram message translation."""

from .common import ResourceLoadError, RootConfig
from .pipeline import Translator, initialize, translate

__all__ = ["ResourceLoadError", "RootConfig", "Translator", "initialize", "translate"]
