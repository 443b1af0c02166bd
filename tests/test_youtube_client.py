from unittest import mock

import pytest
import requests
import yt_dlp

from lingopause.errors import InvalidInputError, TranscriptNotFoundError, UpstreamError
from lingopause.youtube.client import (
    YouTubeClient,
    extract_youtube_id,
    is_youtube_url,
    select_caption_track,
)

VTT = "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nfirst line\n\n00:00:02.000 --> 00:00:04.000\nsecond line\n"


def _tracks(*langs):
    return {lang: [{"ext": "json3", "url": f"json3-{lang}"}, {"ext": "vtt", "url": f"vtt-{lang}"}] for lang in langs}


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ&t=10s",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://m.youtube.com/shorts/dQw4w9WgXcQ",
])
def test_extract_youtube_id(url):
    assert is_youtube_url(url)
    assert extract_youtube_id(url) == "dQw4w9WgXcQ"


def test_extract_youtube_id_accepts_bare_id_and_rejects_others():
    assert extract_youtube_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_youtube_id("https://example.com/video") is None
    assert not is_youtube_url("https://example.com/video")


def test_select_prefers_uploaded_subtitles():
    info = {"subtitles": _tracks("fr"), "automatic_captions": _tracks("en")}
    assert select_caption_track(info) == ("fr", "vtt-fr")


def test_select_language_order():
    info = {"language": "de", "automatic_captions": _tracks("en", "de", "es")}
    assert select_caption_track(info) == ("de", "vtt-de")
    assert select_caption_track(info, ["es"]) == ("es", "vtt-es")


def test_select_matches_regional_variant():
    info = {"automatic_captions": _tracks("ja", "en-US")}
    assert select_caption_track(info) == ("en-US", "vtt-en-US")


def test_select_without_vtt_returns_none():
    info = {"subtitles": {"en": [{"ext": "srv3", "url": "x"}]}, "automatic_captions": {}}
    assert select_caption_track(info) is None
    assert select_caption_track({}) is None


def _response(text="", status=200):
    response = mock.Mock()
    response.text = text
    response.encoding = "utf-8"
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return response


def test_fetch_transcript():
    client = YouTubeClient()
    info = {"automatic_captions": _tracks("en")}
    with mock.patch.object(client, "extract_info", return_value=info) as extract, \
            mock.patch("lingopause.youtube.client.requests.get", return_value=_response(VTT)) as get:
        segments = client.fetch_transcript("https://youtu.be/dQw4w9WgXcQ")

    extract.assert_called_once_with("dQw4w9WgXcQ")
    assert get.call_args[0][0] == "vtt-en"
    assert [s.text for s in segments] == ["first line", "second line"]
    assert segments[1].offset == 2.0


def test_fetch_transcript_without_tracks():
    client = YouTubeClient()
    with mock.patch.object(client, "extract_info", return_value={}):
        with pytest.raises(TranscriptNotFoundError):
            client.fetch_transcript("dQw4w9WgXcQ")


def test_fetch_transcript_with_empty_track():
    client = YouTubeClient()
    with mock.patch.object(client, "extract_info", return_value={"subtitles": _tracks("en")}), \
            mock.patch("lingopause.youtube.client.requests.get", return_value=_response("WEBVTT\n\n")):
        with pytest.raises(TranscriptNotFoundError):
            client.fetch_transcript("dQw4w9WgXcQ")


def test_fetch_transcript_download_failure():
    client = YouTubeClient()
    with mock.patch.object(client, "extract_info", return_value={"subtitles": _tracks("en")}), \
            mock.patch("lingopause.youtube.client.requests.get", return_value=_response(status=429)):
        with pytest.raises(UpstreamError):
            client.fetch_transcript("dQw4w9WgXcQ")


def test_fetch_transcript_invalid_video():
    with pytest.raises(InvalidInputError):
        YouTubeClient().fetch_transcript("not a video")


def test_extract_info_wraps_yt_dlp_errors():
    client = YouTubeClient(cookies_path="cookies.txt")
    ydl = mock.MagicMock()
    ydl.__enter__.return_value.extract_info.side_effect = yt_dlp.utils.DownloadError("Video unavailable")
    with mock.patch("lingopause.youtube.client.yt_dlp.YoutubeDL", return_value=ydl) as ydl_cls:
        with pytest.raises(UpstreamError):
            client.extract_info("dQw4w9WgXcQ")

    opts = ydl_cls.call_args[0][0]
    assert opts["cookiefile"] == "cookies.txt"
    assert opts["skip_download"] is True
