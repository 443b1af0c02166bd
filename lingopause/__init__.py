"""
LingoPause - Listen-and-repeat language practice for YouTube videos

Periodically pauses a video, shows a random transcript segment translated
into the learner's target language, and scores the learner's spoken
repetition with a Levenshtein-based similarity percentage.

Features:
- Similarity scoring shared by the backend and local presenters
- Pause scheduling state machine with randomized intervals
- YouTube transcript fetching and caption parsing
- Translation via the Google Translate web endpoint
- HTTP backend for the browser extension
- Speech recognition of recorded answers

Example usage:
    >>> from lingopause import score
    >>> round(score("kitten", "sitting"), 2)
    57.14
    >>>
    >>> from lingopause import LocalSegmentProvider
    >>> provider = LocalSegmentProvider()
    >>> segment = provider.fetch_random_translated_segment("VIDEO_ID", "es-ES")
    >>> print(segment.translated_text)
"""

import logging

__version__ = "0.1.0"
__author__ = "LingoPause Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from .errors import LingoPauseError, TranscriptNotFoundError, UpstreamError, InvalidInputError

# Data models
from .models import (
    PlaybackState,
    PauseCycle,
    SimilarityResult,
    ScheduleConfig,
    TranscriptSegment,
    TranslatedSegment,
    PracticeSettings,
)

# Similarity scoring
from .similarity import score, compare, grade, levenshtein_distance

# Scheduling
from .scheduler import PauseScheduler, VideoController, ThreadingTimerFactory

# Content pipeline
from .youtube import YouTubeClient, extract_youtube_id, is_youtube_url, parse_caption_vtt
from .translation import Translator, translate_text
from .segments import (
    SegmentProvider,
    LocalSegmentProvider,
    BackendSegmentProvider,
    build_provider,
    fallback_segment,
    pick_random_segment,
    get_random_translated_segment,
)

# Sessions and recognition
from .session import PracticeSession, Presenter
from .recognition import AnswerRecognizer, FasterWhisperRecognizer, recognize_answer, score_spoken_answer

# Settings
from .config import load_settings, save_settings, validate_settings

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Errors
    "LingoPauseError",
    "TranscriptNotFoundError",
    "UpstreamError",
    "InvalidInputError",

    # Models
    "PlaybackState",
    "PauseCycle",
    "SimilarityResult",
    "ScheduleConfig",
    "TranscriptSegment",
    "TranslatedSegment",
    "PracticeSettings",

    # Similarity
    "score",
    "compare",
    "grade",
    "levenshtein_distance",

    # Scheduling
    "PauseScheduler",
    "VideoController",
    "ThreadingTimerFactory",

    # Content pipeline
    "YouTubeClient",
    "extract_youtube_id",
    "is_youtube_url",
    "parse_caption_vtt",
    "Translator",
    "translate_text",
    "SegmentProvider",
    "LocalSegmentProvider",
    "BackendSegmentProvider",
    "build_provider",
    "fallback_segment",
    "pick_random_segment",
    "get_random_translated_segment",

    # Sessions and recognition
    "PracticeSession",
    "Presenter",
    "AnswerRecognizer",
    "FasterWhisperRecognizer",
    "recognize_answer",
    "score_spoken_answer",

    # Settings
    "load_settings",
    "save_settings",
    "validate_settings",
]
