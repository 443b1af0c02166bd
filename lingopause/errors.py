"""
Exception hierarchy for LingoPause.

The similarity scorer and the pause scheduler never raise these during
normal operation. They are raised by the content pipeline (transcripts,
translation, settings) and mapped to HTTP status codes by the backend.
"""


class LingoPauseError(Exception):
    """Base class for all LingoPause errors."""


class TranscriptNotFoundError(LingoPauseError):
    """No transcript is available for the requested video."""


class UpstreamError(LingoPauseError):
    """A third-party service (YouTube, translation endpoint) failed."""


class InvalidInputError(LingoPauseError, ValueError):
    """Required input is missing or malformed."""
