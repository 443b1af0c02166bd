import random

import pytest


class FakeVideo:
    """Video controller that records commands and echoes play/pause events."""

    def __init__(self, time=0.0):
        self.time = time
        self.paused = False
        self.commands = []
        self.on_pause = None
        self.on_play = None

    def current_time(self):
        return self.time

    def pause(self):
        self.paused = True
        self.commands.append("pause")
        if self.on_pause:
            self.on_pause()

    def play(self):
        self.paused = False
        self.commands.append("play")
        if self.on_play:
            self.on_play()


class ManualTimer:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # Fires even when cancelled, like a timer whose cancel() lost the race.
        self.fired = True
        self.callback()


class ManualTimers:
    """Timer factory whose timers only fire when a test says so."""

    def __init__(self):
        self.created = []

    def __call__(self, delay, callback):
        timer = ManualTimer(delay, callback)
        self.created.append(timer)
        return timer

    @property
    def pending(self):
        return [t for t in self.created if not (t.cancelled or t.fired)]

    @property
    def last(self):
        return self.created[-1]


@pytest.fixture
def video():
    return FakeVideo(time=42.5)


@pytest.fixture
def timers():
    return ManualTimers()


@pytest.fixture
def rng():
    return random.Random(1234)
