"""
Caption parsing for LingoPause.

Turns WebVTT caption tracks downloaded from YouTube into a list of
TranscriptSegment objects. Handles both uploaded subtitles and automatic
captions, whose cues carry inline word timings and repeat the previous line
as the caption scrolls.
"""

import logging
import re
from typing import Dict, List

from ..models import TranscriptSegment
from ..utils import timestamp_to_seconds

logger = logging.getLogger(__name__)

# Pre-compiled regex patterns
_TIMESTAMP_PATTERN = re.compile(
    r'^((?:\d+:)?\d{2}:\d{2}\.\d{3})\s+-->\s+((?:\d+:)?\d{2}:\d{2}\.\d{3})'
)
_INLINE_TAG_PATTERN = re.compile(r'<[^>]*>')
_WHITESPACE_PATTERN = re.compile(r'\s+')
_HEADER_PREFIXES = ('WEBVTT', 'Kind:', 'Language:', 'NOTE', 'STYLE', 'REGION')

_HTML_ENTITIES = {
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&nbsp;': ' ',
    '&#39;': "'",
    '&quot;': '"',
}


def parse_vtt_cues(vtt_content: str) -> List[Dict[str, object]]:
    """
    Parse VTT content and extract individual cues.

    Args:
        vtt_content: VTT file content as string

    Returns:
        List of cue dictionaries with 'start', 'end' (seconds) and 'lines'

    Example:
        >>> cues = parse_vtt_cues("WEBVTT\\n\\n00:00:01.000 --> 00:00:03.000\\nHello world")
        >>> cues[0]['lines']
        ['Hello world']
    """
    cues = []
    lines = vtt_content.replace('\r\n', '\n').split('\n')
    i = 0

    while i < len(lines):
        line = lines[i].strip()

        if not line or line.startswith(_HEADER_PREFIXES):
            i += 1
            continue

        match = _TIMESTAMP_PATTERN.match(line)
        if match:
            text_lines = []
            i += 1
            # Auto captions use a single-space line as padding; only a truly
            # empty line ends the cue.
            while i < len(lines) and lines[i]:
                text_lines.append(lines[i].strip())
                i += 1

            cues.append({
                'start': timestamp_to_seconds(match.group(1)),
                'end': timestamp_to_seconds(match.group(2)),
                'lines': text_lines,
            })
        else:
            # Cue identifiers and other metadata
            i += 1

    return cues


def clean_caption_text(text: str) -> str:
    """
    Strip inline timing and styling tags from a caption line.

    Example:
        >>> clean_caption_text("hello<00:00:01.200><c> world</c>")
        'hello world'
    """
    text = _INLINE_TAG_PATTERN.sub('', text)
    for entity, replacement in _HTML_ENTITIES.items():
        text = text.replace(entity, replacement)
    return _WHITESPACE_PATTERN.sub(' ', text).strip()


def parse_caption_vtt(vtt_content: str) -> List[TranscriptSegment]:
    """
    Convert a caption track into transcript segments.

    Automatic captions scroll: each cue repeats the line shown by the previous
    cue before adding a new one. Lines already shown by the previous cue are
    dropped so every spoken line appears in exactly one segment.

    Args:
        vtt_content: WebVTT document

    Returns:
        Segments in playback order; cues without new text are skipped
    """
    segments: List[TranscriptSegment] = []
    previous_lines: List[str] = []

    for cue in parse_vtt_cues(vtt_content):
        lines = [clean_caption_text(line) for line in cue['lines']]
        lines = [line for line in lines if line]

        new_lines = [line for line in lines if line not in previous_lines]
        if lines:
            previous_lines = lines

        if not new_lines:
            continue

        segments.append(TranscriptSegment(
            text=' '.join(new_lines),
            offset=round(cue['start'], 3),
            duration=round(max(0.0, cue['end'] - cue['start']), 3),
        ))

    logger.debug(f"Parsed {len(segments)} transcript segments")
    return segments
