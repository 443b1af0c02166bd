"""
YouTube module for LingoPause.

Provides transcript discovery, download and caption parsing.
"""

from .client import (
    YouTubeClient,
    is_youtube_url,
    extract_youtube_id,
    select_caption_track,
    fetch_youtube_transcript,
)

from .captions import (
    parse_vtt_cues,
    parse_caption_vtt,
    clean_caption_text,
)

__all__ = [
    'YouTubeClient',
    'is_youtube_url',
    'extract_youtube_id',
    'select_caption_track',
    'fetch_youtube_transcript',
    'parse_vtt_cues',
    'parse_caption_vtt',
    'clean_caption_text',
]
