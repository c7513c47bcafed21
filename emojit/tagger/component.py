"""Part-of-speech tagger built from an initial tagger and transformation rules."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from importlib import resources

import nltk
from nltk.tag import BrillTagger, DefaultTagger, PerceptronTagger, SequentialBackoffTagger
from nltk.tag.api import TaggerI
from nltk.tbl import Rule
from pydantic import TypeAdapter

from emojit.common.component import ComponentFactory
from emojit.common.exceptions import ResourceLoadError
from emojit.tagger.config import TaggerConfig
from emojit.tagger.rules import parse_rules

logger = logging.getLogger(__name__)

BUNDLED_RULES = "rules.txt"
PERCEPTRON_MODEL = "averaged_perceptron_tagger_eng"

_LEXICON = TypeAdapter(dict[str, list[str]])


class LexiconTagger(SequentialBackoffTagger):
    """Tag words with the first tag listed for them in a lexicon.

    Lookup tries the word as written, then lower-cased; words found in neither
    are left to the backoff tagger.
    """

    def __init__(self, lexicon: dict[str, list[str]], backoff=None):
        super().__init__(backoff)
        self._lexicon = lexicon

    def choose_tag(self, tokens, index, history):
        word = tokens[index]
        tags = self._lexicon.get(word) or self._lexicon.get(word.lower())
        return tags[0] if tags else None


class PretrainedTagger(TaggerI):
    """nltk's averaged perceptron, tagging each non-empty word in context.

    Empty words get the default category.
    """

    def __init__(self, model: PerceptronTagger, default_category: str):
        self._model = model
        self._default = default_category

    def tag(self, tokens):
        words = [token for token in tokens if token]
        tags = iter([tag for _, tag in self._model.tag(words)] if words else [])
        return [(token, next(tags) if token else self._default) for token in tokens]


def load_perceptron(download: bool = True) -> PerceptronTagger:
    """Load the pretrained perceptron, fetching its data when allowed."""
    try:
        return PerceptronTagger()
    except LookupError as e:
        if not download:
            raise ResourceLoadError(f"tagger model {PERCEPTRON_MODEL}", str(e)) from e

    logger.info(f"Downloading nltk resource {PERCEPTRON_MODEL}")
    try:
        nltk.download(PERCEPTRON_MODEL, quiet=True, raise_on_error=True)
        return PerceptronTagger()
    except (LookupError, ValueError, OSError) as e:
        raise ResourceLoadError(f"tagger model {PERCEPTRON_MODEL}", str(e)) from e


def load_lexicon(path: str) -> dict[str, list[str]]:
    """Load a lexicon mapping words to their tags, most likely first."""
    try:
        with open(path, encoding="utf-8") as f:
            lexicon = _LEXICON.validate_json(f.read())
    except (OSError, ValueError) as e:
        raise ResourceLoadError(f"lexicon {path}", str(e)) from e

    empty = [word for word, tags in lexicon.items() if not tags]
    if empty:
        raise ResourceLoadError(f"lexicon {path}", f"words without tags: {empty[:5]}")

    logger.info(f"Loaded lexicon {path} with {len(lexicon)} words")
    return lexicon


def load_rules(path: str | None = None) -> list[Rule]:
    """Load transformation rules, the bundled ones when no path is given."""
    name = path or BUNDLED_RULES
    try:
        if path:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        else:
            text = resources.files(__package__).joinpath("data").joinpath(BUNDLED_RULES).read_text(
                encoding="utf-8"
            )
        rules = parse_rules(text.splitlines())
    except (OSError, ValueError) as e:
        raise ResourceLoadError(f"rules {name}", str(e)) from e

    logger.info(f"Loaded {len(rules)} transformation rules from {name}")
    return rules


class GrammaticalTagger(ComponentFactory):
    """Assigns Penn Treebank style tags to a sequence of words.

    The initial tags come from a configured lexicon with a default-category
    backoff, or from nltk's pretrained perceptron when no lexicon is set.
    Transformation rules then refine them in order.
    """

    _config_type = TaggerConfig

    def __init__(self, config: TaggerConfig) -> None:
        """Initialize tagger, loading its model and rules."""
        super().__init__(config)
        if config.lexicon:
            backoff = DefaultTagger(config.default_category)
            initial = LexiconTagger(load_lexicon(config.lexicon), backoff=backoff)
        else:
            initial = PretrainedTagger(
                load_perceptron(config.download_model), config.default_category
            )
        self._rules = load_rules(config.rules)
        self._tagger = BrillTagger(initial, self._rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Transformation rules in application order."""
        return tuple(self._rules)

    def tag(self, words: Sequence[str]) -> list[tuple[str, str]]:
        """Tag words, one (word, tag) pair per word in submission order."""
        if not words:
            return []
        return self._tagger.tag(list(words))
