"""
YouTube client for LingoPause.

Fetches video transcripts using yt-dlp to discover caption tracks and
requests to download them.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

import requests
import yt_dlp

from ..errors import InvalidInputError, TranscriptNotFoundError, UpstreamError
from ..models import TranscriptSegment
from .captions import parse_caption_vtt

logger = logging.getLogger(__name__)

_YOUTUBE_URL_PATTERN = re.compile(
    r'^(https?://)?(www\.|m\.)?(youtube\.com/(watch\?(.*&)?v=|shorts/|embed/)|youtu\.be/)([\w-]{11})'
)
_VIDEO_ID_PATTERN = re.compile(r'^[\w-]{11}$')


def is_youtube_url(url: str) -> bool:
    """
    Check if the provided URL is a valid YouTube video URL.

    Example:
        >>> is_youtube_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        True
        >>> is_youtube_url("https://example.com/video")
        False
    """
    return bool(_YOUTUBE_URL_PATTERN.match(url))


def extract_youtube_id(url_or_id: str) -> Optional[str]:
    """
    Extract the YouTube video ID from a URL, or accept a bare ID.

    Example:
        >>> extract_youtube_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_youtube_id("dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
    """
    url_or_id = url_or_id.strip()
    if _VIDEO_ID_PATTERN.match(url_or_id):
        return url_or_id
    match = _YOUTUBE_URL_PATTERN.match(url_or_id)
    return match.group(6) if match else None


def select_caption_track(
    info: Dict,
    languages: Optional[Iterable[str]] = None,
) -> Optional[Tuple[str, str]]:
    """
    Pick a VTT caption track from yt-dlp metadata.

    Uploaded subtitles win over automatic captions. Within each group the
    language order is: requested languages, the video's own language,
    English, then whatever is available.

    Args:
        info: Result of YoutubeDL.extract_info
        languages: Preferred caption languages

    Returns:
        (language, url) of the chosen track, or None
    """
    preferred = list(languages or [])
    if info.get('language'):
        preferred.append(info['language'])
    preferred.append('en')

    for captions in (info.get('subtitles') or {}, info.get('automatic_captions') or {}):
        vtt_tracks = {}
        for lang, formats in captions.items():
            for fmt in formats or []:
                if fmt.get('ext') == 'vtt' and fmt.get('url'):
                    vtt_tracks[lang] = fmt['url']
                    break

        if not vtt_tracks:
            continue

        for lang in preferred:
            if lang in vtt_tracks:
                return lang, vtt_tracks[lang]
            # Regional variants such as en-US when 'en' was asked for
            for track_lang, url in vtt_tracks.items():
                if track_lang.split('-')[0] == lang.split('-')[0]:
                    return track_lang, url

        lang = next(iter(vtt_tracks))
        return lang, vtt_tracks[lang]

    return None


class YouTubeClient:
    """
    Client for fetching YouTube transcripts.

    Uses yt-dlp to read video metadata without downloading media, then
    downloads the chosen caption track over HTTP.
    """

    def __init__(self, cookies_path: Optional[str] = None, timeout: float = 30):
        """
        Initialize YouTube client.

        Args:
            cookies_path: Optional path to cookies file for authentication
            timeout: Timeout in seconds for caption downloads
        """
        self.cookies_path = cookies_path
        self.timeout = timeout

    def _get_ydl_opts(self, **overrides) -> Dict:
        opts = {
            'quiet': True,
            'no_warnings': True,
            'skip_download': True,
            'writesubtitles': True,
            'writeautomaticsub': True,
            'subtitlesformat': 'vtt',
        }

        if self.cookies_path:
            opts['cookiefile'] = self.cookies_path

        opts.update(overrides)
        return opts

    def extract_info(self, video_id: str) -> Dict:
        """
        Read video metadata, including available caption tracks.

        Raises:
            UpstreamError: If yt-dlp cannot read the video
        """
        url = f"https://www.youtube.com/watch?v={video_id}"
        try:
            with yt_dlp.YoutubeDL(self._get_ydl_opts()) as ydl:
                return ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as e:
            logger.error(f"Failed to read metadata for {video_id}: {str(e)}")
            raise UpstreamError(f"YouTube metadata extraction failed: {str(e)}") from e

    def download_caption_track(self, url: str) -> str:
        """
        Download a caption track as text.

        Raises:
            UpstreamError: If the request fails
        """
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download caption track: {str(e)}")
            raise UpstreamError(f"Caption download failed: {str(e)}") from e
        response.encoding = response.encoding or 'utf-8'
        return response.text

    def fetch_transcript(
        self,
        video: str,
        languages: Optional[Iterable[str]] = None,
    ) -> List[TranscriptSegment]:
        """
        Fetch the transcript of a video.

        Args:
            video: YouTube video ID or URL
            languages: Preferred caption languages

        Returns:
            Non-empty list of transcript segments

        Raises:
            InvalidInputError: If video is not a YouTube ID or URL
            TranscriptNotFoundError: If the video has no usable captions
            UpstreamError: If YouTube cannot be reached
        """
        video_id = extract_youtube_id(video)
        if not video_id:
            raise InvalidInputError(f"Invalid YouTube video: {video}")

        logger.info(f"Fetching transcript for video: {video_id}")
        info = self.extract_info(video_id)

        track = select_caption_track(info, languages)
        if track is None:
            raise TranscriptNotFoundError(f"No transcript found for video {video_id}")

        lang, track_url = track
        logger.info(f"Using '{lang}' captions for {video_id}")

        segments = parse_caption_vtt(self.download_caption_track(track_url))
        if not segments:
            raise TranscriptNotFoundError(f"Transcript for video {video_id} is empty")

        logger.info(f"Fetched {len(segments)} transcript segments for {video_id}")
        return segments


def fetch_youtube_transcript(
    video: str,
    languages: Optional[Iterable[str]] = None,
    cookies_path: Optional[str] = None,
) -> List[TranscriptSegment]:
    """Fetch a transcript. Convenience function wrapping YouTubeClient."""
    client = YouTubeClient(cookies_path=cookies_path)
    return client.fetch_transcript(video, languages)
