"""
Practice sessions.

A PracticeSession ties one video to a pause scheduler, a segment provider and
a presenter. Each time the scheduler pauses the video the session fetches a
translated segment and hands it to the presenter, which shows and speaks it,
lets the learner record an answer and finally calls back to resume.
"""

import logging
import random
import threading
from typing import Callable, Optional

from .models import PlaybackState, PracticeSettings, SimilarityResult, TranslatedSegment
from .scheduler import PauseScheduler, VideoController
from .segments import SegmentProvider
from .similarity import compare

logger = logging.getLogger(__name__)


class Presenter:
    """
    Displays a practice prompt to the learner.

    Implementations must call on_resume exactly once when the learner is done;
    until then the video stays paused.
    """

    def present(self, segment: TranslatedSegment, on_resume: Callable[[], None]) -> None:
        raise NotImplementedError


class PracticeSession:
    """
    One practice session for one video.

    Args:
        video: Controller for the video element
        provider: Source of translated segments
        presenter: Shows prompts and reports when to resume
        video_id: YouTube video ID
        settings: Language and interval settings
        timer_factory: Passed to PauseScheduler
        rng: Passed to PauseScheduler
    """

    def __init__(
        self,
        video: VideoController,
        provider: SegmentProvider,
        presenter: Presenter,
        video_id: str,
        settings: Optional[PracticeSettings] = None,
        timer_factory: Optional[Callable] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or PracticeSettings()
        self.provider = provider
        self.presenter = presenter
        self.video_id = video_id
        self.current_segment: Optional[TranslatedSegment] = None
        self.scheduler = PauseScheduler(
            video,
            config=self.settings.schedule_config(),
            timer_factory=timer_factory,
            rng=rng,
        )
        self.scheduler.add_pause_listener(self._on_pause)

    @property
    def state(self) -> PlaybackState:
        return self.scheduler.state

    def start(self) -> None:
        logger.info(f"Starting practice session for video: {self.video_id}")
        self.scheduler.start()

    def stop(self) -> None:
        logger.info(f"Stopping practice session for video: {self.video_id}")
        self.scheduler.stop()

    def notify_manual_pause(self) -> None:
        self.scheduler.notify_manual_pause()

    def notify_manual_play(self) -> None:
        self.scheduler.notify_manual_play()

    def notify_ended(self) -> None:
        self.scheduler.notify_ended()

    def score_answer(self, recognized_text: str, segment: Optional[TranslatedSegment] = None) -> SimilarityResult:
        """
        Score what the learner said against the translated text.

        Args:
            recognized_text: Output of speech recognition
            segment: Segment to score against (default: the current prompt)
        """
        segment = segment or self.current_segment
        reference = segment.translated_text if segment else ""
        result = compare(reference, recognized_text)
        logger.info(f"Similarity: {result.score_percent:.1f}% ({result.grade})")
        return result

    def _on_pause(self, at_time: float) -> None:
        segment = self.provider.fetch_random_translated_segment(self.video_id, self.settings.language)
        # The fetch runs unlocked; the session may have ended meanwhile.
        if self.scheduler.state is not PlaybackState.SCHEDULED_PAUSE_ACTIVE:
            logger.info("Pause cycle ended before the segment arrived; not presenting")
            return
        self.current_segment = segment
        self.presenter.present(segment, self._make_resume_callback())

    def _make_resume_callback(self) -> Callable[[], None]:
        lock = threading.Lock()
        called = []

        def on_resume() -> None:
            with lock:
                if called:
                    logger.debug("Ignoring repeated resume request")
                    return
                called.append(True)
            self.current_segment = None
            self.scheduler.resume()

        return on_resume
