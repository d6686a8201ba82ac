"""
ISL Voice Interpreter

Main entry point for turning an English transcript into a playable sequence
of ISL sign videos.
"""

import logging
from typing import Dict, List, Optional

from .grammar import GlossConverter
from .matcher import SentenceMatcher
from .sign_sequencer import SignSequencer
from ..video_cache import VideoCache, video_cache

logger = logging.getLogger(__name__)

NOTHING_TO_INTERPRET = 'Nothing to interpret'
NOT_SUPPORTED = ('One or more words in this sentence are not currently '
                 'supported by the interpreter library.')
NO_SIGNS_AVAILABLE = 'None of the signs in this sentence are currently available.'


class ISLInterpreter:
    """
    Main interpreter class for English transcript -> ISL sign videos.

    Usage:
        interpreter = ISLInterpreter(db_path="/path/to/isl_signs.db")
        result = interpreter.interpret("What is your name")
        # result['gloss'] == 'YOUR NAME WHAT'
        # result['words'] and result['videoUrls'] drive the player
    """

    def __init__(self, db_path: Optional[str] = None,
                 converter: Optional[GlossConverter] = None,
                 matcher: Optional[SentenceMatcher] = None,
                 sequencer: Optional[SignSequencer] = None,
                 cache: Optional[VideoCache] = None):
        """
        Initialize the interpreter.

        Args:
            db_path: Path to SQLite database with signs. If None, uses config.
            converter: Gloss converter (default lexicon if None)
            matcher: Supported sentence matcher (built-in catalog if None)
            sequencer: Sign lookup/timing (built on db_path if None)
            cache: Video cache to preload into (process-wide cache if None)
        """
        self.converter = converter or GlossConverter()
        self.matcher = matcher if matcher is not None else SentenceMatcher()
        self.sequencer = sequencer or SignSequencer(db_path)
        self.cache = cache if cache is not None else video_cache

    def interpret(self, text: str) -> Dict:
        """
        Interpret a transcript.

        Args:
            text: English sentence as recognised from speech

        Returns:
            Dictionary containing:
                - input: Original text
                - gloss: ISL gloss string ('' if nothing to interpret)
                - matched: Whether the gloss is a supported sentence
                - words: Playable sign words, in order
                - videoUrls: Word -> video URL
                - missing: Matched words without a sign video
                - timing: Playback timeline
                - error: None, or why nothing will play
        """
        gloss = self.converter.convert(text)
        result = {
            'input': text,
            'gloss': gloss,
            'matched': False,
            'words': [],
            'videoUrls': {},
            'missing': [],
            'timing': self.sequencer.calculate_timing([]),
            'error': None,
        }

        if not gloss:
            result['error'] = NOTHING_TO_INTERPRET
            return result

        words = self.matcher.match(gloss)
        if words is None:
            logger.info(f"Unsupported sentence: '{gloss}'")
            result['error'] = NOT_SUPPORTED
            return result

        result['matched'] = True
        signs = self.sequencer.lookup_signs(words)

        for sign in signs:
            if sign['found']:
                result['words'].append(sign['word'])
                result['videoUrls'][sign['word']] = sign['videoUrl']
            else:
                logger.warning(f"Sign not found for word: {sign['word']}. Skipping...")
                result['missing'].append(sign['word'])

        if not result['words']:
            result['error'] = NO_SIGNS_AVAILABLE
            return result

        self.cache.preload(result['videoUrls'][w] for w in result['words'])
        result['timing'] = self.sequencer.calculate_timing(signs)

        logger.info(f"Interpreted '{text}' -> {' '.join(result['words'])}")
        return result

    def interpret_batch(self, texts: List[str]) -> List[Dict]:
        """Interpret multiple transcripts."""
        return [self.interpret(text) for text in texts]

    def get_available_signs(self) -> List[str]:
        """Get list of all available signs in the database."""
        return self.sequencer.get_available_signs()


# Convenience function for quick interpretation
def interpret(text: str, db_path: Optional[str] = None) -> Dict:
    """Quick interpret function."""
    interpreter = ISLInterpreter(db_path)
    return interpreter.interpret(text)


if __name__ == '__main__':
    # Show the gloss chain for a few demo sentences
    test_sentences = [
        "What is your name",
        "I like computer",
        "I ate 5 apples",
        "The cat is here",
        "Where are you going",
    ]

    converter = GlossConverter()

    for sentence in test_sentences:
        print(f"\n{'='*60}")
        print(f"Input: {sentence}")
        print(f"{'='*60}")

        for stage, tokens in converter.trace(sentence).items():
            print(f"  {stage:<11} {tokens}")
        print(f"Gloss: {converter.convert(sentence)}")
