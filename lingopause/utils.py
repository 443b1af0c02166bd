"""
Shared utility functions for LingoPause.

Timestamp conversion helpers used by the caption parser and language code
helpers shared by the translator, the providers and the backend.
"""

import re

_LANGUAGE_TAG_PATTERN = re.compile(r'^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$')


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert HH:MM:SS.mmm (or MM:SS.mmm) format to seconds.

    Args:
        timestamp: Timestamp string

    Returns:
        Time in seconds as float

    Example:
        >>> timestamp_to_seconds("00:01:30.500")
        90.5
        >>> timestamp_to_seconds("01:30.500")
        90.5
    """
    parts = timestamp.strip().split(':')
    if len(parts) == 2:
        parts.insert(0, "0")
    h, m, s = parts
    return int(h) * 3600 + int(m) * 60 + float(s)


def is_language_tag(value: str) -> bool:
    """Check whether value looks like a language tag such as 'es' or 'es-ES'."""
    return bool(value) and bool(_LANGUAGE_TAG_PATTERN.match(value))


def primary_language(tag: str) -> str:
    """
    Reduce a locale to its primary language subtag.

    The translation endpoint expects bare codes while speech engines expect
    full locales.

    Example:
        >>> primary_language("es-ES")
        'es'
        >>> primary_language("pt_BR")
        'pt'
    """
    return re.split(r'[-_]', tag.strip(), maxsplit=1)[0].lower()
