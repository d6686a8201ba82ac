"""
ISL Grammar Rules

Rule-based English text to Indian Sign Language gloss conversion.

ISL differs from English word order:
- No articles (a, an, the)
- No helping verbs (am, is, are, was, were)
- Subject -> Object -> Verb (SOV)
- Question words at the end of the sentence
- Glosses are written in UPPERCASE

The conversion is a fixed chain of stages. Each stage takes and returns a
list of lowercase tokens; the order of the chain is part of the contract
because later stages look at the first verb or the first word left by the
earlier ones.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from .lexicon import DEFAULT_LEXICON, Lexicon


# Characters removed before splitting; anything else stays part of a token
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

Stage = Callable[[List[str], Lexicon], List[str]]


def tokenize(text: str) -> List[str]:
    """Lowercase, strip punctuation and split on whitespace."""
    text = PUNCTUATION_PATTERN.sub('', text.lower())
    return [word for word in text.split() if word]


def expand_numbers(tokens: List[str], lexicon: Lexicon) -> List[str]:
    """Replace the digits 0-10 with their number words ("5" -> "five")."""
    return [lexicon.number_map.get(word, word) for word in tokens]


def remove_stopwords(tokens: List[str], lexicon: Lexicon) -> List[str]:
    """Drop articles and helping verbs."""
    stopwords = lexicon.stopwords
    return [word for word in tokens if word not in stopwords]


def lemmatize(tokens: List[str], lexicon: Lexicon) -> List[str]:
    """Map inflected verbs to the root form used for sign lookup."""
    return [lexicon.lemma_map.get(word, word) for word in tokens]


def move_question_word(tokens: List[str], lexicon: Lexicon) -> List[str]:
    """
    Move a leading question word to the end.

    "what your name" -> "your name what". Only the first token is checked
    and only one move happens.
    """
    if len(tokens) > 1 and tokens[0] in lexicon.wh_words:
        return tokens[1:] + tokens[:1]
    return list(tokens)


def move_verb_to_end(tokens: List[str], lexicon: Lexicon) -> List[str]:
    """
    SOV heuristic: move the first verb-looking token to the end.

    Later verbs are left where they are.
    """
    for i, word in enumerate(tokens):
        if lexicon.is_verb(word):
            if i < len(tokens) - 1:
                return tokens[:i] + tokens[i + 1:] + [word]
            break
    return list(tokens)


# Stages run after tokenization, in order. Stopword removal short-circuits
# the chain when it leaves nothing.
STAGES: Tuple[Tuple[str, Stage], ...] = (
    ('numbers', expand_numbers),
    ('stopwords', remove_stopwords),
    ('lemmas', lemmatize),
    ('question', move_question_word),
    ('verb_final', move_verb_to_end),
)


def to_gloss_string(tokens: List[str]) -> str:
    return ' '.join(tokens).upper()


class GlossConverter:
    """
    Converts English sentences to ISL gloss strings.

    Usage:
        converter = GlossConverter()
        converter.convert("I ate 5 apples")   # 'I FIVE APPLES EAT'

    The converter holds no per-call state, so one instance can be shared by
    any number of threads.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or DEFAULT_LEXICON

    def convert(self, text) -> str:
        """
        Convert a sentence to gloss.

        Returns an empty string for empty or non-string input and for input
        that is nothing but articles, helping verbs and punctuation.
        """
        if not text or not isinstance(text, str):
            return ''

        tokens = tokenize(text)
        for name, stage in STAGES:
            tokens = stage(tokens, self.lexicon)
            if not tokens:
                return ''

        return to_gloss_string(tokens)

    def trace(self, text) -> Dict[str, List[str]]:
        """
        Run the chain and record the tokens after every stage.

        Stages that did not run (empty input, short-circuit) are absent from
        the result.
        """
        stages: Dict[str, List[str]] = {}
        if not text or not isinstance(text, str):
            return stages

        tokens = tokenize(text)
        stages['tokens'] = list(tokens)
        for name, stage in STAGES:
            tokens = stage(tokens, self.lexicon)
            stages[name] = list(tokens)
            if not tokens:
                break

        return stages

    def __call__(self, text) -> str:
        return self.convert(text)


_default_converter = GlossConverter()


def convert_to_gloss(text) -> str:
    """Convert text with the default lexicon."""
    return _default_converter.convert(text)
