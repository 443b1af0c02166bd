"""
Speech recognition of recorded answers.

Transcribes an audio recording of the learner repeating a prompt and scores
it against the prompt text. The default recognizer uses faster-whisper.
"""

import logging
import os
from typing import Any, Iterable, Optional

from .models import SimilarityResult
from .similarity import compare
from .utils import primary_language

logger = logging.getLogger(__name__)


def _segment_text(segment: Any) -> str:
    if isinstance(segment, dict):
        return (segment.get("text") or "").strip()
    return (getattr(segment, "text", "") or "").strip()


def join_segments(segments: Iterable[Any]) -> str:
    """Join recognized segments (objects or dicts with 'text') into one answer."""
    return " ".join(part for part in (_segment_text(s) for s in segments) if part)


class AnswerRecognizer:
    """Turns a recorded answer into text in the learner's target language."""

    name = "base"

    def recognize(self, audio_path: str, language: str) -> str:
        raise NotImplementedError


class FasterWhisperRecognizer(AnswerRecognizer):
    """
    Recognizer backed by faster-whisper.

    The model is loaded on first use. Answers are short single utterances, so
    decoding is pinned to the prompt's language instead of auto-detected and
    leading/trailing silence is trimmed with the VAD filter.

    Args:
        model_name: Whisper model size or path
        device: 'cpu', 'cuda' or 'auto'
        compute_type: faster-whisper compute type
        beam_size: Beam width used while decoding
    """

    name = "faster-whisper"

    def __init__(
        self,
        model_name: str = "base",
        device: str = "auto",
        compute_type: str = "default",
        beam_size: int = 5,
    ) -> None:
        self.model_name = model_name
        self.device = device
        self.compute_type = compute_type
        self.beam_size = beam_size
        self._model = None

    @property
    def model(self):
        if self._model is None:
            from faster_whisper import WhisperModel

            logger.info(f"Loading faster-whisper model: {self.model_name}")
            self._model = WhisperModel(self.model_name, device=self.device, compute_type=self.compute_type)
        return self._model

    def recognize(self, audio_path: str, language: str) -> str:
        segments, _info = self.model.transcribe(
            audio_path,
            language=primary_language(language),
            beam_size=self.beam_size,
            vad_filter=True,
        )
        return join_segments(segments)


def recognize_answer(
    audio_path: str,
    language: str,
    recognizer: Optional[AnswerRecognizer] = None,
) -> str:
    """
    Transcribe a recorded answer.

    Args:
        audio_path: Path to the recording
        language: Language the learner spoke, e.g. 'es-ES'
        recognizer: Engine to use (default: FasterWhisperRecognizer())

    Returns:
        Recognized text
    """
    if not os.path.exists(audio_path):
        raise FileNotFoundError(f"Audio file not found: {audio_path}")

    recognizer = recognizer or FasterWhisperRecognizer()
    text = recognizer.recognize(audio_path, language)
    logger.info(f"You said: \"{text}\"")
    return text


def score_spoken_answer(
    reference: str,
    audio_path: str,
    language: str,
    recognizer: Optional[AnswerRecognizer] = None,
) -> SimilarityResult:
    """Transcribe a recorded answer and score it against reference."""
    return compare(reference, recognize_answer(audio_path, language, recognizer))
