"""
Translation client for LingoPause.

Uses the unofficial Google Translate endpoint used by browser widgets. There
is no authentication and no accuracy guarantee; it is suitable for practice
prompts only.
"""

import logging
from typing import Any

import requests

from .errors import UpstreamError
from .utils import primary_language

logger = logging.getLogger(__name__)

TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"


def _extract_translation(data: Any) -> str:
    # Response shape: [[["translated", "original", ...], ...], ...]
    chunks = data[0]
    if not chunks:
        raise ValueError("Empty translation response")
    return ''.join(chunk[0] for chunk in chunks if chunk and chunk[0])


class Translator:
    """
    Client for the Google Translate 'gtx' endpoint.

    Args:
        url: Endpoint URL
        timeout: Request timeout in seconds
        session: Optional requests.Session to reuse connections
    """

    def __init__(self, url: str = TRANSLATE_URL, timeout: float = 10, session: requests.Session = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def translate(self, text: str, target_lang: str, source_lang: str = "auto") -> str:
        """
        Translate text into target_lang.

        Args:
            text: Text to translate
            target_lang: Target language code; locales such as 'es-ES' are
                reduced to their primary subtag
            source_lang: Source language code, 'auto' to detect

        Returns:
            Translated text

        Raises:
            UpstreamError: If the request fails or the response is malformed
        """
        if not text or not text.strip():
            return ""

        params = {
            'client': 'gtx',
            'sl': source_lang,
            'tl': primary_language(target_lang),
            'dt': 't',
            'q': text,
        }

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            translated = _extract_translation(response.json())
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Translation error: {str(e)}")
            raise UpstreamError("Translation failed") from e

        logger.debug(f"Translated {len(text)} characters into '{params['tl']}'")
        return translated


def translate_text(text: str, target_lang: str, source_lang: str = "auto") -> str:
    """Translate text. Convenience function wrapping Translator."""
    return Translator().translate(text, target_lang, source_lang)
