import random
from unittest import mock

import pytest
import requests

from lingopause.errors import TranscriptNotFoundError, UpstreamError
from lingopause.models import TranscriptSegment
from lingopause.segments import (
    FALLBACK_ORIGINAL_TEXT,
    FALLBACK_TRANSLATED_TEXT,
    BackendSegmentProvider,
    LocalSegmentProvider,
    build_provider,
    get_random_translated_segment,
    pick_random_segment,
)

SEGMENTS = [
    TranscriptSegment(text="first", offset=0.0, duration=1.0),
    TranscriptSegment(text="second", offset=1.0, duration=1.0),
    TranscriptSegment(text="third", offset=2.0, duration=1.0),
]


def test_pick_random_segment_uses_rng():
    rng = random.Random(7)
    expected = random.Random(7).choice(SEGMENTS)
    assert pick_random_segment(SEGMENTS, rng) is expected


def test_pick_random_segment_requires_segments():
    with pytest.raises(TranscriptNotFoundError):
        pick_random_segment([])


def test_get_random_translated_segment():
    client = mock.Mock()
    client.fetch_transcript.return_value = SEGMENTS[1:2]
    translator = mock.Mock()
    translator.translate.return_value = "segundo"

    segment = get_random_translated_segment(client, translator, "abc", "es-ES")

    client.fetch_transcript.assert_called_once_with("abc")
    translator.translate.assert_called_once_with("second", "es-ES")
    assert segment.original_text == "second"
    assert segment.translated_text == "segundo"
    assert segment.target_lang == "es-ES"
    assert segment.offset == 1.0
    assert not segment.is_fallback


@pytest.mark.parametrize("error", [
    TranscriptNotFoundError("none"),
    UpstreamError("down"),
    requests.ConnectionError("offline"),
])
def test_local_provider_falls_back(error):
    client = mock.Mock()
    client.fetch_transcript.side_effect = error
    provider = LocalSegmentProvider(client=client, translator=mock.Mock())

    segment = provider.fetch_random_translated_segment("abc", "es-ES")

    assert segment.is_fallback
    assert segment.original_text == FALLBACK_ORIGINAL_TEXT
    assert segment.translated_text == FALLBACK_TRANSLATED_TEXT
    assert segment.target_lang == "es-ES"


def test_local_provider_translation_failure_falls_back():
    client = mock.Mock()
    client.fetch_transcript.return_value = SEGMENTS
    translator = mock.Mock()
    translator.translate.side_effect = UpstreamError("Translation failed")
    provider = LocalSegmentProvider(client=client, translator=translator)

    assert provider.fetch_random_translated_segment("abc", "fr").is_fallback


def _backend_session(payload, status=200):
    session = mock.Mock()
    response = mock.Mock()
    response.status_code = status
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    session.get.return_value = response
    return session


def test_backend_provider_success():
    session = _backend_session({
        "success": True,
        "originalSegment": {"text": "Hello there", "offset": 12.5, "duration": 2.0},
        "translatedText": "Hola",
        "targetLang": "es",
    })
    provider = BackendSegmentProvider("http://localhost:3000/api/", timeout=3, session=session)

    segment = provider.fetch_random_translated_segment("abc", "es-ES")

    session.get.assert_called_once_with(
        "http://localhost:3000/api/random-segment/abc",
        params={"targetLang": "es"},
        timeout=3,
    )
    assert segment.original_text == "Hello there"
    assert segment.translated_text == "Hola"
    assert segment.target_lang == "es-ES"
    assert segment.offset == 12.5
    assert not segment.is_fallback


@pytest.mark.parametrize("payload,status", [
    ({"success": False, "message": "No transcript found for this video"}, 404),
    ({"success": False, "message": "Failed to get random segment"}, 500),
    (ValueError("not json"), 502),
    (["unexpected"], 200),
    ({"success": True, "originalSegment": "x", "translatedText": "Hola"}, 200),
    ({"success": True, "originalSegment": {"text": "hi"}, "translatedText": None}, 200),
    ({"success": True, "originalSegment": {"text": 7}, "translatedText": "Hola"}, 200),
    ({"success": True}, 200),
])
def test_backend_provider_failures_fall_back(payload, status):
    provider = BackendSegmentProvider("http://backend/api", session=_backend_session(payload, status))
    assert provider.fetch_random_translated_segment("abc", "es").is_fallback


def test_backend_provider_network_error_falls_back():
    session = mock.Mock()
    session.get.side_effect = requests.Timeout("slow")
    provider = BackendSegmentProvider("http://backend/api", session=session)
    assert provider.fetch_random_translated_segment("abc", "es").is_fallback


def test_build_provider():
    assert isinstance(build_provider("http://backend/api"), BackendSegmentProvider)
    assert isinstance(build_provider(None), LocalSegmentProvider)
