"""Pipeline stages.

Each stage takes the ordered word profiles, fills in the attributes it owns and
returns the same list, so the stages can be chained in order:

    tokenize -> build_word_profiles -> check_punctuation -> parts_of_speech
    -> check_plurals -> match_emojis -> reconstruct_message
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection

from emojit.dictionary import PictogramDictionary
from emojit.inflection import Pluralizer
from emojit.pipeline.types import WordProfile
from emojit.tagger import GrammaticalTagger

logger = logging.getLogger(__name__)

# First cluster of sentence punctuation in a token
PUNCTUATION_RE = re.compile(r"[!?;,.]+")


def tokenize(message: str) -> list[str]:
    """Split a message on single spaces, keeping empty tokens."""
    return message.split(" ")


def build_word_profiles(tokens: list[str]) -> list[WordProfile]:
    """Create one blank profile per token."""
    return [WordProfile(word=token) for token in tokens]


def check_punctuation(profiles: list[WordProfile]) -> list[WordProfile]:
    """Record the first punctuation cluster and the text before it."""
    for profile in profiles:
        match = PUNCTUATION_RE.search(profile.word)
        if match:
            profile.with_punc = match.group(0)
            profile.without_punc = profile.word[: match.start()]
    return profiles


def parts_of_speech(profiles: list[WordProfile], tagger: GrammaticalTagger) -> list[WordProfile]:
    """Tag the raw words and assign tags by position."""
    tagged = tagger.tag([profile.word for profile in profiles])
    for profile, (_, tag) in zip(profiles, tagged, strict=True):
        profile.part_of_speech = tag
    return profiles


def check_plurals(profiles: list[WordProfile], pluralizer: Pluralizer) -> list[WordProfile]:
    """Flag plural words and record their singular form."""
    for profile in profiles:
        result = pluralizer.singularize(safe_word(profile))
        if result.plural:
            profile.plural = True
            profile.singular = result.singular
    return profiles


def should_match(profile: WordProfile, excluded_tags: Collection[str]) -> bool:
    """Whether the word's grammatical role allows a pictogram."""
    return profile.part_of_speech not in excluded_tags


def safe_word(profile: WordProfile) -> str:
    """The word without its punctuation."""
    if profile.with_punc:
        return profile.without_punc
    return profile.word


def singular_form(profile: WordProfile) -> str:
    """The singular form of a plural word, otherwise the word itself."""
    if profile.plural:
        return profile.singular
    return profile.word


def match_emojis(
    profiles: list[WordProfile],
    dictionary: PictogramDictionary,
    excluded_tags: Collection[str],
) -> list[WordProfile]:
    """Attach a pictogram to every eligible word found in the dictionary."""
    for profile in profiles:
        if not should_match(profile, excluded_tags):
            continue

        emoji = dictionary.match(
            safe_word(profile).lower(),
            singular_form(profile).lower(),
            profile.plural,
        )
        if emoji:
            profile.emoji = emoji
    return profiles


def render_word(profile: WordProfile) -> str:
    """Output unit for one token: its pictogram or safe word, then its punctuation."""
    if profile.emoji:
        unit = profile.emoji + " "
    else:
        unit = safe_word(profile)

    if profile.with_punc:
        unit += profile.with_punc
    return unit


def reconstruct_message(profiles: list[WordProfile]) -> str:
    """Rebuild the message, substituting pictograms and keeping punctuation."""
    return " ".join(render_word(profile) for profile in profiles)
