"""Transformation rule parsing for the Brill tagger.

Rule files hold one rule per line in the form::

    FROM_TAG TO_TAG PREDICATE [ARG [ARG]]

e.g. ``NN VB PREV-TAG TO`` re-tags a noun as a base-form verb when the
previous token is tagged ``TO``. Blank lines and lines starting with ``//`` or
``#`` are ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from nltk.tag.brill import Pos, Word
from nltk.tbl import Feature, Rule

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"^[+-]?\d+([.,]\d+)*$")


class Capitalized(Feature):
    """Whether the token starts with an upper-case letter."""

    json_tag = "emojit.tagger.Capitalized"

    @staticmethod
    def extract_property(tokens, index):
        return tokens[index][0][:1].isupper()


class Numeric(Feature):
    """Whether the token is a number."""

    json_tag = "emojit.tagger.Numeric"

    @staticmethod
    def extract_property(tokens, index):
        return bool(NUMBER_RE.match(tokens[index][0]))


TAG_PREDICATES: dict[str, tuple[int, ...]] = {
    "PREV-TAG": (-1,),
    "NEXT-TAG": (1,),
    "PREV-2-TAG": (-2,),
    "NEXT-2-TAG": (2,),
    "PREV-1-OR-2-TAG": (-2, -1),
    "NEXT-1-OR-2-TAG": (1, 2),
    "PREV-1-OR-2-OR-3-TAG": (-3, -2, -1),
    "NEXT-1-OR-2-OR-3-TAG": (1, 2, 3),
}

WORD_PREDICATES: dict[str, tuple[int, ...]] = {
    "CURRENT-WORD-IS": (0,),
    "PREV-WORD-IS": (-1,),
    "NEXT-WORD-IS": (1,),
    "PREV-1-OR-2-WORD": (-2, -1),
    "NEXT-1-OR-2-WORD": (1, 2),
}

FLAG_PREDICATES: dict[str, tuple[type[Feature], tuple[int, ...]]] = {
    "CURRENT-WORD-IS-CAP": (Capitalized, (0,)),
    "PREV-WORD-IS-CAP": (Capitalized, (-1,)),
    "CURRENT-WORD-IS-NUMBER": (Numeric, (0,)),
}

SURROUND_PREDICATE = "SURROUNDTAG"


def _flag(value: str) -> bool:
    if value.upper() not in {"YES", "NO"}:
        raise ValueError(f"Expected YES or NO, got '{value}'")
    return value.upper() == "YES"


def parse_rule(line: str) -> Rule | None:
    """Parse a single rule line.

    Returns None for rules whose predicate is not supported. Raises ValueError
    when the line is structurally malformed.
    """
    fields = line.split()
    if len(fields) < 3:
        raise ValueError(f"Expected 'FROM TO PREDICATE [ARGS]', got '{line}'")

    original, replacement, predicate, *args = fields

    if predicate in TAG_PREDICATES:
        if len(args) != 1:
            raise ValueError(f"{predicate} takes one tag, got {len(args)}")
        conditions = [(Pos(list(TAG_PREDICATES[predicate])), args[0])]
    elif predicate in WORD_PREDICATES:
        if len(args) != 1:
            raise ValueError(f"{predicate} takes one word, got {len(args)}")
        conditions = [(Word(list(WORD_PREDICATES[predicate])), args[0])]
    elif predicate in FLAG_PREDICATES:
        if len(args) > 1:
            raise ValueError(f"{predicate} takes at most one flag, got {len(args)}")
        feature, positions = FLAG_PREDICATES[predicate]
        conditions = [(feature(list(positions)), _flag(args[0]) if args else True)]
    elif predicate == SURROUND_PREDICATE:
        if len(args) != 2:
            raise ValueError(f"{predicate} takes two tags, got {len(args)}")
        conditions = [(Pos([-1]), args[0]), (Pos([1]), args[1])]
    else:
        logger.warning(f"Skipping rule with unsupported predicate: {line}")
        return None

    return Rule(predicate, original, replacement, conditions)


def parse_rules(lines: Iterable[str]) -> list[Rule]:
    """Parse rule lines in order, keeping only supported rules."""
    rules = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(("//", "#")):
            continue
        try:
            rule = parse_rule(line)
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e
        if rule is not None:
            rules.append(rule)
    return rules
