"""
ISL Text-to-Sign Interpreter

Converts English transcripts to ISL gloss and plays supported sentences as
sign video sequences.

Pipeline:
    English Text → Gloss Rules → Sentence Match → Sign Lookup → Video Sequence
"""

from .translator import ISLInterpreter
from .grammar import GlossConverter, convert_to_gloss
from .lexicon import Lexicon, DEFAULT_LEXICON
from .matcher import SentenceMatcher, SupportedSentence, DEFAULT_SENTENCES
from .sign_sequencer import SignSequencer

__all__ = [
    'ISLInterpreter',
    'GlossConverter',
    'convert_to_gloss',
    'Lexicon',
    'DEFAULT_LEXICON',
    'SentenceMatcher',
    'SupportedSentence',
    'DEFAULT_SENTENCES',
    'SignSequencer',
]
