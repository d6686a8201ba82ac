"""
Supported Sentence Matcher

The interpreter only plays sentences it has a complete sign sequence for.
A gloss is matched exactly against a small catalog; each entry lists the
sign words to play, in order.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupportedSentence:
    """A gloss the interpreter can play, and the signs that make it up."""
    gloss: str
    words: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Dict) -> 'SupportedSentence':
        return cls(
            gloss=normalize_gloss(data['gloss']),
            words=tuple(str(w).upper() for w in data['words'])
        )

    def to_dict(self) -> Dict:
        return {'gloss': self.gloss, 'words': list(self.words)}


# Demo catalog. Words normally repeat the gloss tokens; a phrase with a
# single sign (THANK YOU) is one word, and a plural plays the singular
# sign (APPLES -> APPLE).
DEFAULT_SENTENCES = (
    SupportedSentence('HELLO', ('HELLO',)),
    SupportedSentence('THANK YOU', ('THANK YOU',)),
    SupportedSentence('YOUR NAME WHAT', ('YOUR', 'NAME', 'WHAT')),
    SupportedSentence('HOW YOU', ('HOW', 'YOU')),
    SupportedSentence('I COMPUTER LIKE', ('I', 'COMPUTER', 'LIKE')),
    SupportedSentence('I FIVE APPLES EAT', ('I', 'FIVE', 'APPLE', 'EAT')),
    SupportedSentence('I SCHOOL GO', ('I', 'SCHOOL', 'GO')),
    SupportedSentence('I WATER WANT', ('I', 'WATER', 'WANT')),
    SupportedSentence('YOU WHERE GO', ('YOU', 'WHERE', 'GO')),
    SupportedSentence('CAT HERE', ('CAT', 'HERE')),
)


def normalize_gloss(gloss: str) -> str:
    """Uppercase and collapse whitespace so catalog keys compare exactly."""
    return ' '.join(gloss.split()).upper()


class SentenceMatcher:
    """
    Looks up a gloss in the supported sentence catalog.

    Usage:
        matcher = SentenceMatcher()
        matcher.match("YOUR NAME WHAT")   # ['YOUR', 'NAME', 'WHAT']
        matcher.match("MOON BIG")         # None
    """

    def __init__(self, sentences: Optional[Iterable[SupportedSentence]] = None):
        if sentences is None:
            sentences = DEFAULT_SENTENCES

        self._catalog: Dict[str, Tuple[str, ...]] = {}
        for sentence in sentences:
            key = normalize_gloss(sentence.gloss)
            if key in self._catalog:
                logger.warning(f"Duplicate supported sentence '{key}', keeping the last one")
            self._catalog[key] = tuple(sentence.words)

    @classmethod
    def from_records(cls, records: Iterable[Dict]) -> 'SentenceMatcher':
        """Build from ``{'gloss': ..., 'words': [...]}`` records (API/database rows)."""
        return cls(SupportedSentence.from_dict(r) for r in records)

    def match(self, gloss: str) -> Optional[List[str]]:
        """
        Return the sign words for a gloss, or None when it is not supported.

        An empty gloss means there is nothing to interpret and never matches.
        """
        if not gloss or not gloss.strip():
            return None

        words = self._catalog.get(normalize_gloss(gloss))
        if words is None:
            logger.debug(f"No supported sentence for gloss '{gloss}'")
            return None
        return list(words)

    def supported_glosses(self) -> List[str]:
        return list(self._catalog)

    def __contains__(self, gloss: str) -> bool:
        return self.match(gloss) is not None

    def __len__(self) -> int:
        return len(self._catalog)
