"""
Data models for LingoPause.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidInputError


DEFAULT_LANGUAGE = "es-ES"
DEFAULT_MIN_INTERVAL_SECONDS = 30
DEFAULT_MAX_INTERVAL_SECONDS = 60
DEFAULT_BACKEND_URL = "http://localhost:3000/api"
DEFAULT_PORT = 3000


class PlaybackState(Enum):
    """Playback states tracked by the pause scheduler."""
    PLAYING = "playing"
    MANUALLY_PAUSED = "manually_paused"
    SCHEDULED_PAUSE_ARMED = "scheduled_pause_armed"
    SCHEDULED_PAUSE_ACTIVE = "scheduled_pause_active"
    ENDED = "ended"


@dataclass
class PauseCycle:
    """A scheduled pause that has fired and is waiting for resume."""
    triggered_at: float  # playback time in seconds
    delay_chosen_ms: int


@dataclass(frozen=True)
class SimilarityResult:
    """Outcome of comparing a reference text with what the learner said."""
    reference_text: str
    candidate_text: str
    score_percent: float

    @property
    def grade(self) -> str:
        from .similarity import grade
        return grade(self.score_percent)


@dataclass
class ScheduleConfig:
    """Bounds for the random delay between scheduled pauses."""
    min_interval_seconds: int = DEFAULT_MIN_INTERVAL_SECONDS
    max_interval_seconds: int = DEFAULT_MAX_INTERVAL_SECONDS

    def __post_init__(self):
        for name in ("min_interval_seconds", "max_interval_seconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")
        if self.min_interval_seconds > self.max_interval_seconds:
            raise InvalidInputError(
                f"min_interval_seconds ({self.min_interval_seconds}) must not exceed "
                f"max_interval_seconds ({self.max_interval_seconds})"
            )


@dataclass
class TranscriptSegment:
    """One timestamped caption cue of a video transcript."""
    text: str
    offset: float    # seconds from the start of the video
    duration: float  # seconds

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TranslatedSegment:
    """A transcript excerpt together with its translation."""
    original_text: str
    translated_text: str
    target_lang: str
    offset: Optional[float] = None
    is_fallback: bool = False


@dataclass
class PracticeSettings:
    """User settings for a practice session."""
    language: str = DEFAULT_LANGUAGE  # BCP-47 tag used for speech, e.g. es-ES
    min_interval_seconds: int = DEFAULT_MIN_INTERVAL_SECONDS
    max_interval_seconds: int = DEFAULT_MAX_INTERVAL_SECONDS
    backend_url: str = DEFAULT_BACKEND_URL
    port: int = DEFAULT_PORT
    request_timeout: float = 10.0
    extra: Dict[str, Any] = field(default_factory=dict)

    def schedule_config(self) -> ScheduleConfig:
        return ScheduleConfig(
            min_interval_seconds=self.min_interval_seconds,
            max_interval_seconds=self.max_interval_seconds,
        )
