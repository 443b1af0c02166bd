"""
Random translated segments for practice prompts.

A segment provider answers one question per pause cycle: "give me a random
excerpt of this video's transcript, translated into the learner's language".
Providers never raise; when anything goes wrong they return a fixed fallback
pair so the practice cycle can still complete.
"""

import logging
import random
from typing import Optional, Sequence

import requests

from .errors import LingoPauseError, TranscriptNotFoundError, UpstreamError
from .models import TranscriptSegment, TranslatedSegment
from .translation import Translator
from .utils import primary_language
from .youtube import YouTubeClient

logger = logging.getLogger(__name__)

FALLBACK_ORIGINAL_TEXT = "This is a fallback transcript segment."
FALLBACK_TRANSLATED_TEXT = "Este es un segmento de transcripción de respaldo."


def fallback_segment(target_lang: str) -> TranslatedSegment:
    """Return the fixed segment shown when no real content is available."""
    return TranslatedSegment(
        original_text=FALLBACK_ORIGINAL_TEXT,
        translated_text=FALLBACK_TRANSLATED_TEXT,
        target_lang=target_lang,
        is_fallback=True,
    )


def pick_random_segment(
    segments: Sequence[TranscriptSegment],
    rng: Optional[random.Random] = None,
) -> TranscriptSegment:
    """
    Choose one segment uniformly at random.

    Raises:
        TranscriptNotFoundError: If there are no segments
    """
    if not segments:
        raise TranscriptNotFoundError("No transcript found for this video")
    return (rng or random).choice(segments)


def get_random_translated_segment(
    client: YouTubeClient,
    translator: Translator,
    video_id: str,
    target_lang: str,
    rng: Optional[random.Random] = None,
) -> TranslatedSegment:
    """
    Fetch a transcript, pick a random segment and translate it.

    Raises:
        TranscriptNotFoundError: If the video has no transcript
        UpstreamError: If YouTube or the translation endpoint fails
    """
    segment = pick_random_segment(client.fetch_transcript(video_id), rng)
    translated = translator.translate(segment.text, target_lang)
    return TranslatedSegment(
        original_text=segment.text,
        translated_text=translated,
        target_lang=target_lang,
        offset=segment.offset,
    )


class SegmentProvider:
    """Base class for sources of translated practice segments."""

    def _fetch(self, video_id: str, target_lang: str) -> TranslatedSegment:
        raise NotImplementedError

    def fetch_random_translated_segment(self, video_id: str, target_lang: str) -> TranslatedSegment:
        """
        Return a random translated segment, or the fallback pair on failure.

        Args:
            video_id: YouTube video ID
            target_lang: Language to translate into (e.g. 'es-ES')
        """
        try:
            segment = self._fetch(video_id, target_lang)
        except (LingoPauseError, requests.RequestException) as e:
            logger.error(f"Error fetching transcript segment: {str(e)}")
            return fallback_segment(target_lang)

        logger.info(f"Original text: {segment.original_text}")
        logger.info(f"Translated text: {segment.translated_text}")
        return segment


class LocalSegmentProvider(SegmentProvider):
    """Fetches and translates segments in-process."""

    def __init__(
        self,
        client: Optional[YouTubeClient] = None,
        translator: Optional[Translator] = None,
        rng: Optional[random.Random] = None,
    ):
        self.client = client or YouTubeClient()
        self.translator = translator or Translator()
        self.rng = rng

    def _fetch(self, video_id: str, target_lang: str) -> TranslatedSegment:
        return get_random_translated_segment(self.client, self.translator, video_id, target_lang, self.rng)


class BackendSegmentProvider(SegmentProvider):
    """
    Fetches segments from a running LingoPause backend.

    Args:
        backend_url: Base URL of the API, e.g. http://localhost:3000/api
        timeout: Request timeout in seconds
    """

    def __init__(self, backend_url: str, timeout: float = 10, session: requests.Session = None):
        self.backend_url = backend_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _fetch(self, video_id: str, target_lang: str) -> TranslatedSegment:
        url = f"{self.backend_url}/random-segment/{video_id}"
        response = self.session.get(
            url,
            params={'targetLang': primary_language(target_lang)},
            timeout=self.timeout,
        )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"Backend returned invalid JSON (HTTP {response.status_code})") from e

        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected backend response (HTTP {response.status_code})")

        if not data.get('success'):
            message = data.get('message', f"HTTP {response.status_code}")
            if response.status_code == 404:
                raise TranscriptNotFoundError(message)
            raise UpstreamError(message)

        original = data.get('originalSegment')
        translated = data.get('translatedText')
        if (
            not isinstance(original, dict)
            or not isinstance(original.get('text'), str)
            or not isinstance(translated, str)
        ):
            raise UpstreamError("Unexpected backend response")

        offset = original.get('offset')
        return TranslatedSegment(
            original_text=original['text'],
            translated_text=translated,
            target_lang=target_lang,
            offset=offset if isinstance(offset, (int, float)) else None,
        )


def build_provider(backend_url: Optional[str] = None, timeout: float = 10) -> SegmentProvider:
    """Use the HTTP backend when a URL is given, otherwise work in-process."""
    if backend_url:
        return BackendSegmentProvider(backend_url, timeout=timeout)
    return LocalSegmentProvider(client=YouTubeClient(timeout=timeout), translator=Translator(timeout=timeout))

