"""Pytest configuration."""

import json

import pytest

from emojit.dictionary import DictionaryConfig, DictionaryEntry, PictogramDictionary
from emojit.inflection import Pluralizer
from emojit.pipeline import Translator, TranslatorConfig, initialize
from emojit.tagger import GrammaticalTagger, TaggerConfig

LEXICON = {
    "I": ["PRP"],
    "you": ["PRP"],
    "my": ["PRP$"],
    "the": ["DT"],
    "a": ["DT"],
    "to": ["TO"],
    "quickly": ["RB"],
    "love": ["VB", "NN"],
    "run": ["VB", "NN"],
    "runs": ["VBZ", "NNS"],
    "cat": ["NN"],
    "dog": ["NN"],
    "big": ["JJ"],
    "of": ["IN"],
}

RULES = """\
// test rules
VB NN PREV-TAG DT
VBZ NNS PREV-TAG DT
"""


@pytest.fixture
def entries() -> list[DictionaryEntry]:
    """Small ordered dictionary."""
    return [
        DictionaryEntry(key="cat", char="🐱", category="animals", keywords=("cats", "feline")),
        DictionaryEntry(key="puppy", char="🐶", category="animals", keywords=("dog", "pet")),
        DictionaryEntry(key="u7121", char="🈚", category="symbols", keywords=("nothing", "kanji")),
        DictionaryEntry(key="heart", char="❤️", category="symbols", keywords=("love", "like")),
        DictionaryEntry(key="runner", char="🏃", category="people", keywords=("run", "running")),
        DictionaryEntry(key="pizza", char="🍕", category="food", keywords=("food",)),
    ]


@pytest.fixture
def dictionary(entries) -> PictogramDictionary:
    """Dictionary over the small entry set."""
    return PictogramDictionary(DictionaryConfig(), entries=entries)


@pytest.fixture
def lexicon_file(tmp_path) -> str:
    """Lexicon file on disk."""
    file = tmp_path / "lexicon.json"
    file.write_text(json.dumps(LEXICON), encoding="utf-8")
    return str(file)


@pytest.fixture
def rules_file(tmp_path) -> str:
    """Rules file on disk."""
    file = tmp_path / "rules.txt"
    file.write_text(RULES, encoding="utf-8")
    return str(file)


@pytest.fixture
def tagger(lexicon_file, rules_file) -> GrammaticalTagger:
    """Tagger built from the test lexicon and rules."""
    return GrammaticalTagger(TaggerConfig(lexicon=lexicon_file, rules=rules_file))


@pytest.fixture
def translator(dictionary, tagger) -> Translator:
    """Translator over the test resources."""
    return Translator(
        TranslatorConfig(),
        dictionary=dictionary,
        tagger=tagger,
        pluralizer=Pluralizer(),
    )


@pytest.fixture(scope="session")
def bundled_translator() -> Translator:
    """Translator over the bundled resources."""
    return initialize()
