"""Noun singularization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import inflect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Singularization:
    """Outcome of singularizing a word."""

    word: str
    singular: str

    @property
    def plural(self) -> bool:
        """Whether the word differs from its singular form."""
        return self.singular != self.word


@lru_cache(maxsize=1)
def default_engine() -> inflect.engine:
    return inflect.engine()


def singularize(word: str, engine: inflect.engine | None = None) -> Singularization:
    """Singularize a word.

    Words the engine cannot handle are treated as already singular, so this
    never raises.
    """
    if not word:
        return Singularization(word, word)

    try:
        singular = (engine or default_engine()).singular_noun(word)
    except Exception as e:
        logger.debug(f"Could not singularize '{word}': {e}")
        return Singularization(word, word)

    # inflect returns False for words that are already singular
    if not singular:
        return Singularization(word, word)
    return Singularization(word, singular)


class Pluralizer:
    """Singularizer bound to one inflect engine."""

    def __init__(self, engine: inflect.engine | None = None) -> None:
        self._engine = engine or default_engine()

    def singularize(self, word: str) -> Singularization:
        return singularize(word, self._engine)
