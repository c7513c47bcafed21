"""Test noun singularization."""

from unittest.mock import MagicMock

import pytest

from emojit.inflection import Pluralizer, Singularization, singularize


@pytest.mark.parametrize(
    "word, singular",
    [
        ("cats", "cat"),
        ("dogs", "dog"),
        ("boxes", "box"),
    ],
)
def test_plural_nouns(word, singular):
    """Test plural nouns are reduced to their singular."""
    result = singularize(word)
    assert result == Singularization(word, singular)
    assert result.plural


@pytest.mark.parametrize("word", ["cat", "pizza", "love"])
def test_singular_words(word):
    """Test singular words come back unchanged."""
    result = singularize(word)
    assert result.singular == word
    assert not result.plural


def test_empty_word():
    """Test the empty word is singular."""
    assert singularize("") == Singularization("", "")


def test_engine_failure_is_singular():
    """Test engine errors are treated as a singular word."""
    engine = MagicMock()
    engine.singular_noun.side_effect = TypeError("bad word")

    result = Pluralizer(engine).singularize("geese")

    assert result == Singularization("geese", "geese")
    engine.singular_noun.assert_called_once_with("geese")


def test_engine_false_is_singular():
    """Test a False answer from the engine means singular."""
    engine = MagicMock()
    engine.singular_noun.return_value = False

    assert not Pluralizer(engine).singularize("cat").plural
