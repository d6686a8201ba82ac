"""
Sign video cache.

Keeps track of which sign video URLs have been handed out for preloading,
so a sentence that repeats a sign does not fetch it twice and the set of
warm videos stays bounded.
"""

import logging
import threading
from collections import OrderedDict
from typing import Iterable, Optional
from urllib.parse import urlparse

from . import config

logger = logging.getLogger(__name__)


def is_valid_sign_url(url) -> bool:
    """Only absolute http(s) URLs are playable."""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


class VideoCache:
    """LRU registry of preloaded sign video URLs."""

    def __init__(self, max_size: Optional[int] = None):
        if max_size is None:
            max_size = config.CACHE_CONFIG['max_videos']
        self.max_size = max_size
        self._store: "OrderedDict[str, bool]" = OrderedDict()
        self._lock = threading.Lock()

    def preload(self, urls: Iterable[str]) -> int:
        """
        Register URLs for preloading.

        Invalid URLs are skipped. Already cached URLs become most recently
        used. Returns the number of URLs newly added; a cache of size 0
        keeps nothing.
        """
        if self.max_size <= 0:
            return 0

        added = 0
        with self._lock:
            for url in dict.fromkeys(urls):
                if not is_valid_sign_url(url):
                    logger.warning(f"Skipping invalid sign URL: {url!r}")
                    continue

                if url in self._store:
                    self._store.move_to_end(url)
                    continue

                if len(self._store) >= self.max_size:
                    evicted, _ = self._store.popitem(last=False)
                    logger.debug(f"Evicted {evicted} from video cache")

                self._store[url] = True
                added += 1
        return added

    def is_cached(self, url: str) -> bool:
        with self._lock:
            return url in self._store

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


video_cache = VideoCache()
