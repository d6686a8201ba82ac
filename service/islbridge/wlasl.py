"""
WLASL metadata import.

Turns the WLASL ``WLASL_v0.3.json`` metadata into sign records
(``{word, videoUrl, durationMs, dominantHand}``) for the sign store.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple


def local_video_path(videos_dir: str, video_id: str) -> str:
    return os.path.join(videos_dir, f"{video_id}.mp4")


def pick_video_url(instances: List[Dict[str, Any]], videos_dir: str, base_url: str) -> Optional[str]:
    """
    Choose the video for one gloss.

    A locally downloaded instance wins; otherwise the first instance with an
    external http(s) URL; otherwise None.
    """
    for inst in instances:
        video_id = inst.get("video_id")
        if video_id and os.path.exists(local_video_path(videos_dir, video_id)):
            return f"{base_url.rstrip('/')}/{video_id}.mp4"

    for inst in instances:
        url = inst.get("url")
        if isinstance(url, str) and url.startswith("http"):
            return url

    return None


def build_sign_entries(
    metadata: List[Dict[str, Any]],
    videos_dir: str,
    base_url: str,
) -> Tuple[List[Dict[str, Any]], int]:
    """
    Build sign records from WLASL metadata.

    Returns:
        Tuple of (signs, skipped) where skipped counts glosses with no video
    """
    signs: List[Dict[str, Any]] = []
    skipped = 0

    for entry in metadata:
        word = str(entry.get("gloss", "")).strip().upper()
        if not word:
            skipped += 1
            continue

        video_url = pick_video_url(entry.get("instances") or [], videos_dir, base_url)
        if video_url is None:
            skipped += 1
            continue

        signs.append({
            "word": word,
            "videoUrl": video_url,
            "durationMs": None,
            "dominantHand": "RIGHT",
        })

    return signs, skipped
