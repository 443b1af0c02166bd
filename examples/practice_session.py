"""
Practice session example.

Runs a session against a simulated video player in the terminal. Every
10-20 seconds the video "pauses", a random translated segment of the real
video's transcript is shown, and the typed answer is scored.

Pipeline:
1. Scheduler arms a random timer while the video plays
2. Timer fires → video pauses → segment fetched (fallback on failure)
3. Presenter shows the prompt and scores the answer
4. Presenter resumes → scheduler re-arms with a new random delay
"""

import logging
import time

from lingopause import LocalSegmentProvider, PracticeSession, PracticeSettings, Presenter, VideoController

# Configure logging to see lingopause internal logs
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class SimulatedVideo(VideoController):
    """Wall-clock driven stand-in for a video element."""

    def __init__(self):
        self._position = 0.0
        self._started = time.monotonic()
        self.playing = True

    def current_time(self):
        if self.playing:
            return self._position + time.monotonic() - self._started
        return self._position

    def pause(self):
        self._position = self.current_time()
        self.playing = False

    def play(self):
        self._started = time.monotonic()
        self.playing = True


class TerminalPresenter(Presenter):
    def __init__(self, session_ref):
        self.session_ref = session_ref

    def present(self, segment, on_resume):
        print(f"\nOriginal: {segment.original_text}")
        print(f"Translated: {segment.translated_text}")
        answer = input("Repeat the translation (empty to skip): ").strip()
        if answer:
            result = self.session_ref[0].score_answer(answer)
            print(f"Similarity: {result.score_percent:.1f}% ({result.grade})")
        on_resume()


def main():
    video_id = "dQw4w9WgXcQ"
    settings = PracticeSettings(language="es-ES", min_interval_seconds=10, max_interval_seconds=20)

    session_ref = []
    session = PracticeSession(
        SimulatedVideo(),
        LocalSegmentProvider(),
        TerminalPresenter(session_ref),
        video_id=video_id,
        settings=settings,
    )
    session_ref.append(session)

    session.start()
    try:
        # Three minutes of "watching"
        time.sleep(180)
    except KeyboardInterrupt:
        pass
    finally:
        session.notify_ended()

if __name__ == "__main__":
    main()
