"""Translation handle tying the dictionary, tagger and pluralizer together."""

from __future__ import annotations

import logging
from typing import Any

from emojit.common.config import RootConfig
from emojit.dictionary import PictogramDictionary
from emojit.inflection import Pluralizer
from emojit.pipeline import stages
from emojit.pipeline.config import TranslatorConfig
from emojit.pipeline.types import WordProfile
from emojit.tagger import GrammaticalTagger

logger = logging.getLogger(__name__)


class Translator:
    """Immutable, shareable handle over preloaded language resources.

    Build it once with `initialize` and reuse it for every message; a call to
    `translate` only mutates its own word profiles.
    """

    def __init__(
        self,
        config: TranslatorConfig,
        dictionary: PictogramDictionary,
        tagger: GrammaticalTagger,
        pluralizer: Pluralizer | None = None,
    ) -> None:
        """Initialize translator."""
        self._config = config
        self._dictionary = dictionary
        self._tagger = tagger
        self._pluralizer = pluralizer or Pluralizer()
        self._excluded_tags = frozenset(config.excluded_tags)

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    @property
    def dictionary(self) -> PictogramDictionary:
        return self._dictionary

    @property
    def tagger(self) -> GrammaticalTagger:
        return self._tagger

    @property
    def excluded_tags(self) -> frozenset[str]:
        return self._excluded_tags

    def analyze(self, message: str) -> list[WordProfile]:
        """Run every stage up to matching, one profile per token."""
        profiles = stages.build_word_profiles(stages.tokenize(message))
        profiles = stages.check_punctuation(profiles)
        profiles = stages.parts_of_speech(profiles, self._tagger)
        profiles = stages.check_plurals(profiles, self._pluralizer)
        return stages.match_emojis(profiles, self._dictionary, self._excluded_tags)

    def translate(self, message: str) -> str:
        """Replace eligible words of a message with pictograms."""
        logger.debug(f"Translating message: {message!r}")

        translation = stages.reconstruct_message(self.analyze(message))
        logger.debug(f"Translated to: {translation!r}")
        return translation


def initialize(config: RootConfig | dict[str, Any] | None = None) -> Translator:
    """Load language resources and build a translator.

    Raises:
        ResourceLoadError: If the tagger model, lexicon or rules cannot be loaded
    """
    if config is None:
        config = RootConfig()
    elif isinstance(config, dict):
        config = RootConfig.from_dict(**config)

    logger.info("Loading language resources")
    dictionary = PictogramDictionary.from_config(config.dictionary)
    tagger = GrammaticalTagger.from_config(config.tagger)

    return Translator(
        TranslatorConfig(**config.translator),
        dictionary=dictionary,
        tagger=tagger,
        pluralizer=Pluralizer(),
    )


def translate(translator: Translator, message: str) -> str:
    """Translate a message with a preloaded translator."""
    return translator.translate(message)
