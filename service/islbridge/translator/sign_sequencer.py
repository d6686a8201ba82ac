"""
Sign Sequencer

Manages lookup of sign videos from the database and sequences them with
playback timing for the front-end player.
"""

import threading
from typing import Dict, List, Optional

from .. import config, database


class SignSequencer:
    """
    Handles sign database lookups and sequence timing.
    """

    def __init__(self, db_path: Optional[str] = None,
                 default_duration_ms: Optional[int] = None,
                 transition_ms: Optional[int] = None):
        """
        Initialize with database location.

        Args:
            db_path: Path to SQLite database. If None, uses the configured one.
            default_duration_ms: Duration for signs without a recorded one
            transition_ms: Gap between consecutive signs
        """
        self.db_path = db_path
        self.default_duration_ms = (
            default_duration_ms if default_duration_ms is not None
            else config.TIMING_CONFIG['default_sign_duration_ms']
        )
        self.transition_ms = (
            transition_ms if transition_ms is not None
            else config.TIMING_CONFIG['transition_ms']
        )
        self._cache = {}  # Simple in-memory cache
        self._lock = threading.Lock()

    def lookup_signs(self, words: List[str]) -> List[Dict]:
        """
        Look up signs for a list of words.

        Args:
            words: Sign words in playback order

        Returns:
            List of sign data dictionaries, one per word, in the same order
        """
        return [self._lookup_single_sign(word) for word in words]

    def _lookup_single_sign(self, word: str) -> Dict:
        key = word.upper()

        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return dict(cached)

        sign = database.get_sign_by_word(key, db_path=self.db_path)

        if sign:
            result = {
                'found': True,
                'word': key,
                'videoUrl': sign['videoUrl'],
                'durationMs': sign['durationMs'],
                'dominantHand': sign['dominantHand'],
            }
            with self._lock:
                self._cache[key] = result
        else:
            # Not cached: the sign may be imported later
            result = {'found': False, 'word': key}

        return dict(result)

    def clear_cache(self):
        with self._lock:
            self._cache.clear()

    def calculate_timing(self, sign_sequence: List[Dict]) -> Dict:
        """
        Calculate playback timing for a sign sequence.

        Signs that were not found are not played and get no slot.
        """
        timeline = []
        current_time = 0

        for sign in sign_sequence:
            if not sign.get('found'):
                continue

            # Add transition time (except for first sign)
            if timeline:
                current_time += self.transition_ms

            duration = sign.get('durationMs') or self.default_duration_ms

            timeline.append({
                'index': len(timeline),
                'word': sign['word'],
                'start_ms': current_time,
                'end_ms': current_time + duration,
                'duration_ms': duration,
            })
            current_time += duration

        return {
            'total_duration_ms': current_time,
            'timeline': timeline,
            'sign_count': len(timeline),
        }

    def get_available_signs(self) -> List[str]:
        """Get list of all available sign words in database."""
        return [sign['word'] for sign in database.get_all_signs(db_path=self.db_path)]
