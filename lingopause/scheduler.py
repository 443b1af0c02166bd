"""
Pause scheduler for practice sessions.

Owns the playback state of one video session and decides when to pause the
video for a practice prompt. The scheduler is driven by two kinds of events:

- its own timer expiring after a random delay, and
- notifications from whatever observes the video (manual pause/play, end).

Timers that fire after the state they were armed for has changed are stale
and are discarded without pausing the video.
"""

import logging
import random
import threading
from typing import Callable, List, Optional

from .models import PauseCycle, PlaybackState, ScheduleConfig

logger = logging.getLogger(__name__)

PauseListener = Callable[[float], None]


class VideoController:
    """Interface to the underlying video element."""

    def current_time(self) -> float:
        raise NotImplementedError

    def pause(self) -> None:
        raise NotImplementedError

    def play(self) -> None:
        raise NotImplementedError


class ThreadingTimerFactory:
    """Creates daemon threading.Timer instances for the scheduler."""

    def __call__(self, delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return timer


class PauseScheduler:
    """
    State machine deciding when a playing video is paused for practice.

    One instance exists per video session. Transitions are serialised with a
    re-entrant lock so events are applied in the order they arrive. Pause
    listeners are called outside the lock and may call resume() directly.

    Args:
        video: Controller for the video being watched
        config: Bounds for the random delay between pauses
        timer_factory: Callable (delay_seconds, callback) returning a handle
            with cancel(); defaults to threading.Timer
        rng: Random source for delay selection
    """

    def __init__(
        self,
        video: VideoController,
        config: Optional[ScheduleConfig] = None,
        timer_factory: Optional[Callable] = None,
        rng: Optional[random.Random] = None,
    ):
        self.video = video
        self.config = config or ScheduleConfig()
        self._timer_factory = timer_factory or ThreadingTimerFactory()
        self._rng = rng or random.Random()
        self._lock = threading.RLock()
        self._state = PlaybackState.PLAYING
        self._timer = None
        self._generation = 0
        self._cycle: Optional[PauseCycle] = None
        self._pending_delay_ms: Optional[int] = None
        self._listeners: List[PauseListener] = []

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def active_cycle(self) -> Optional[PauseCycle]:
        return self._cycle

    def add_pause_listener(self, listener: PauseListener) -> None:
        """Register a callback receiving the playback time of each scheduled pause."""
        self._listeners.append(listener)

    def choose_delay(self) -> int:
        """Draw a delay in whole seconds, uniformly from the configured bounds."""
        return self._rng.randint(self.config.min_interval_seconds, self.config.max_interval_seconds)

    def start(self) -> None:
        """Arm the first timer of a session whose video is playing."""
        with self._lock:
            if self._state is not PlaybackState.PLAYING:
                logger.debug(f"start() ignored in state {self._state.name}")
                return
            self._arm()

    def resume(self) -> None:
        """Leave a scheduled pause, restart playback and arm a new timer."""
        with self._lock:
            if self._state is not PlaybackState.SCHEDULED_PAUSE_ACTIVE:
                logger.debug(f"resume() ignored in state {self._state.name}")
                return
            self._cycle = None
            self._state = PlaybackState.PLAYING
            self.video.play()
            logger.info("Video resumed")
            self._arm()

    def notify_manual_pause(self) -> None:
        with self._lock:
            if self._state not in (PlaybackState.PLAYING, PlaybackState.SCHEDULED_PAUSE_ARMED):
                return
            self._cancel_timer()
            self._state = PlaybackState.MANUALLY_PAUSED
            logger.info("Video paused by user, scheduled pause suspended")

    def notify_manual_play(self) -> None:
        with self._lock:
            if self._state is not PlaybackState.MANUALLY_PAUSED:
                return
            self._state = PlaybackState.PLAYING
            logger.info("Video playing again, rescheduling pause")
            self._arm()

    def notify_ended(self) -> None:
        with self._lock:
            if self._state is PlaybackState.ENDED:
                return
            self._cancel_timer()
            self._cycle = None
            self._state = PlaybackState.ENDED
            logger.info("Video ended, no further pauses will be scheduled")

    def stop(self) -> None:
        """End the session early; behaves like the video ending."""
        self.notify_ended()

    def _arm(self) -> None:
        self._cancel_timer()
        delay = self.choose_delay()
        self._generation += 1
        generation = self._generation
        self._pending_delay_ms = delay * 1000
        self._state = PlaybackState.SCHEDULED_PAUSE_ARMED
        logger.info(f"Will pause video in {delay} seconds")
        self._timer = self._timer_factory(delay, lambda: self._on_timer(generation))

    def _cancel_timer(self) -> None:
        # Invalidate any armed timer even if cancel() comes too late.
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._state is not PlaybackState.SCHEDULED_PAUSE_ARMED:
                logger.debug("Discarding stale pause timer")
                return
            self._timer = None
            at_time = self.video.current_time()
            self._cycle = PauseCycle(triggered_at=at_time, delay_chosen_ms=self._pending_delay_ms)
            # State changes first so the pause event echoed by the video is ignored.
            self._state = PlaybackState.SCHEDULED_PAUSE_ACTIVE
            self.video.pause()
            logger.info(f"Video paused at {at_time:.2f}s")
            listeners = list(self._listeners)

        for listener in listeners:
            listener(at_time)
