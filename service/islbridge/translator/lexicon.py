"""
ISL Gloss Lexicon

Fixed word tables used by the gloss converter. The tables are built once at
import time and are read-only afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping


# Determiners have no sign in ISL
ARTICLES = frozenset({'a', 'an', 'the'})

# Copula / auxiliaries are dropped (carried by facial expression instead)
HELPING_VERBS = frozenset({'am', 'is', 'are', 'was', 'were'})

# Verb forms recognised for SOV reordering
COMMON_VERBS = frozenset({
    'go', 'going', 'gone',
    'eat', 'eating', 'ate',
    'play', 'playing', 'played',
    'see', 'seeing', 'saw',
    'come', 'coming', 'came',
    'want', 'wants', 'wanted',
    'like', 'likes', 'liked',
    'do', 'doing', 'did',
})

# Question words that move to the end of the sentence in ISL
WH_WORDS = frozenset({'what', 'where', 'when', 'why', 'who'})

# Inflected verb -> root form used by the sign video dataset
LEMMA_MAP: Mapping[str, str] = MappingProxyType({
    'going': 'go',
    'gone': 'go',
    'eating': 'eat',
    'ate': 'eat',
    'playing': 'play',
    'played': 'play',
    'seeing': 'see',
    'saw': 'see',
    'coming': 'come',
    'came': 'come',
    'wanting': 'want',
    'wanted': 'want',
    'likes': 'like',
    'liked': 'like',
    'doing': 'do',
    'did': 'do',
    'helping': 'help',
    'helped': 'help',
    'working': 'work',
    'worked': 'work',
})

# Digits 0-10 are signed as number words; nothing else is expanded
NUMBER_MAP: Mapping[str, str] = MappingProxyType({
    '0': 'zero',
    '1': 'one',
    '2': 'two',
    '3': 'three',
    '4': 'four',
    '5': 'five',
    '6': 'six',
    '7': 'seven',
    '8': 'eight',
    '9': 'nine',
    '10': 'ten',
})


@dataclass(frozen=True)
class Lexicon:
    """
    Bundle of the lookup tables a converter works with.

    The default instance wraps the module tables above. A custom lexicon can
    be passed to ``GlossConverter`` (tests, alternative vocabularies); it is
    frozen so a converter never sees its tables change mid-call.
    """
    articles: FrozenSet[str] = ARTICLES
    helping_verbs: FrozenSet[str] = HELPING_VERBS
    common_verbs: FrozenSet[str] = COMMON_VERBS
    wh_words: FrozenSet[str] = WH_WORDS
    lemma_map: Mapping[str, str] = field(default_factory=lambda: LEMMA_MAP)
    number_map: Mapping[str, str] = field(default_factory=lambda: NUMBER_MAP)

    @property
    def stopwords(self) -> FrozenSet[str]:
        """Tokens removed before reordering."""
        return self.articles | self.helping_verbs

    def is_verb(self, word: str) -> bool:
        """A token looks like a verb if it is a known verb form or has a lemma."""
        return word in self.common_verbs or word in self.lemma_map

    @classmethod
    def build(cls, articles=None, helping_verbs=None, common_verbs=None,
              wh_words=None, lemma_map=None, number_map=None) -> 'Lexicon':
        """
        Build a lexicon from plain collections, freezing them.

        Any table left as None falls back to the default one.
        """
        def _set(values, default):
            return default if values is None else frozenset(w.lower() for w in values)

        def _map(values, default):
            if values is None:
                return default
            return MappingProxyType({k.lower(): v.lower() for k, v in dict(values).items()})

        return cls(
            articles=_set(articles, ARTICLES),
            helping_verbs=_set(helping_verbs, HELPING_VERBS),
            common_verbs=_set(common_verbs, COMMON_VERBS),
            wh_words=_set(wh_words, WH_WORDS),
            lemma_map=_map(lemma_map, LEMMA_MAP),
            number_map=_map(number_map, NUMBER_MAP),
        )


DEFAULT_LEXICON = Lexicon()
