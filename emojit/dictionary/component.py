"""Keyword-indexed pictogram dictionary."""

from __future__ import annotations

import json
import logging
from collections.abc import Collection, Iterable
from importlib import resources
from typing import Any

import emoji
from path import Path

from emojit.common.component import ComponentFactory
from emojit.common.exceptions import ResourceLoadError
from emojit.dictionary.config import DictionaryConfig
from emojit.dictionary.types import DictionaryEntry

logger = logging.getLogger(__name__)

BUNDLED_DICTIONARY = "emojis.json"


def parse_entries(raw: Any) -> tuple[DictionaryEntry, ...]:
    """Build ordered entries from a decoded emojilib-style mapping."""
    if not isinstance(raw, dict):
        raise ValueError(f"Dictionary must be a JSON object, got {type(raw).__name__}")

    entries = []
    for key, item in raw.items():
        if not isinstance(item, dict):
            raise ValueError(f"Entry '{key}' must be an object")
        if not item.get("char"):
            logger.debug("Skipping entry without pictogram: %s", key)
            continue
        entries.append(DictionaryEntry.from_lib(key, item))
    return tuple(entries)


def load_bundled() -> tuple[DictionaryEntry, ...]:
    """Load the dictionary shipped with the package."""
    try:
        resource = resources.files(__package__).joinpath("data").joinpath(BUNDLED_DICTIONARY)
        return parse_entries(json.loads(resource.read_text(encoding="utf-8")))
    except (OSError, ValueError) as e:
        raise ResourceLoadError("bundled dictionary", str(e)) from e


def load_file(path: str | Path) -> tuple[DictionaryEntry, ...]:
    """Load a custom dictionary file."""
    with open(path, encoding="utf-8") as f:
        return parse_entries(json.load(f))


def load_emoji_data(skip: Collection[str] = ()) -> tuple[DictionaryEntry, ...]:
    """Build entries for every fully-qualified emoji the emoji library knows.

    The CLDR short name becomes the key and the library's aliases the
    keywords. Skin tone variants and pictograms listed in `skip` are left out.
    """
    fully_qualified = emoji.STATUS["fully_qualified"]
    entries = []
    for char, data in emoji.EMOJI_DATA.items():
        if char in skip or data.get("status") != fully_qualified:
            continue
        name = data["en"].strip(":").lower()
        if "skin_tone" in name:
            continue
        aliases = tuple(alias.strip(":").lower() for alias in data.get("alias", ()))
        entries.append(DictionaryEntry(key=name, char=char, keywords=aliases))
    return tuple(entries)


class PictogramDictionary(ComponentFactory):
    """Read-only, ordered collection of pictogram entries."""

    _config_type = DictionaryConfig

    def __init__(
        self,
        config: DictionaryConfig,
        entries: Iterable[DictionaryEntry] | None = None,
    ) -> None:
        """Initialize dictionary, loading entries unless given."""
        super().__init__(config)
        self._entries = tuple(entries) if entries is not None else self._load()
        self._excluded = frozenset(config.excluded_keywords)
        logger.info(f"Dictionary ready with {len(self._entries)} entries")

    def _load(self) -> tuple[DictionaryEntry, ...]:
        """Load the configured entries, then the emoji library's when enabled."""
        entries = self._load_file()
        if self.config.emoji_data:
            extra = load_emoji_data(skip={entry.char for entry in entries})
            logger.info(f"Added {len(extra)} entries from the emoji library")
            entries += extra
        return entries

    def _load_file(self) -> tuple[DictionaryEntry, ...]:
        """Load the configured dictionary, falling back to the bundled one."""
        if self.config.path:
            try:
                entries = load_file(self.config.path)
                logger.info(f"Loaded dictionary from {self.config.path}")
                return entries
            except (OSError, ValueError) as e:
                logger.warning(
                    f"Could not load dictionary {self.config.path}, using bundled default: {e}"
                )
        return load_bundled()

    @property
    def entries(self) -> tuple[DictionaryEntry, ...]:
        """Entries in stored order."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def match(self, safe: str, singular: str, plural: bool = False) -> str | None:
        """Find the pictogram for a word.

        The scan follows stored order and the first satisfied condition wins:
        canonical key against the safe then singular form, then each keyword
        against the safe then singular form. A plural word matched through a
        keyword by its singular form yields the pictogram twice.

        Args:
            safe: Lower-cased word without punctuation
            singular: Lower-cased singular form
            plural: Whether the word was detected as plural

        Returns:
            The pictogram string, or None when nothing matches
        """
        for entry in self._entries:
            if entry.flagged(self._excluded):
                continue

            if safe == entry.key or singular == entry.key:
                return entry.char

            for keyword in entry.keywords:
                if safe == keyword:
                    return entry.char
                if singular == keyword:
                    if plural:
                        return f"{entry.char} {entry.char}"
                    return entry.char

        return None
