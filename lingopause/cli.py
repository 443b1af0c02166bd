"""
Command line interface for LingoPause.

Commands:
    serve        Run the HTTP backend used by the browser extension
    segment      Print a random translated segment of a video
    score        Score a spoken answer given as text
    score-audio  Transcribe a recorded answer and score it
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import load_settings
from .errors import LingoPauseError
from .recognition import FasterWhisperRecognizer, score_spoken_answer
from .segments import LocalSegmentProvider
from .server import run_server
from .similarity import compare
from .translation import Translator
from .youtube import YouTubeClient, extract_youtube_id

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lingopause", description="Listen-and-repeat practice for YouTube videos")
    parser.add_argument("--settings", help="Path to a JSON settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP backend")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, help="Port (default: from settings)")

    segment = subparsers.add_parser("segment", help="Print a random translated segment")
    segment.add_argument("video", help="YouTube video ID or URL")
    segment.add_argument("--lang", help="Target language (default: from settings)")

    score_cmd = subparsers.add_parser("score", help="Score an answer given as text")
    score_cmd.add_argument("reference")
    score_cmd.add_argument("candidate")

    score_audio = subparsers.add_parser("score-audio", help="Score a recorded answer")
    score_audio.add_argument("reference")
    score_audio.add_argument("audio", help="Path to the recording")
    score_audio.add_argument("--lang", help="Spoken language (default: from settings)")
    score_audio.add_argument("--model", default="base", help="faster-whisper model name")

    return parser


def _print_result(result) -> None:
    print(json.dumps({
        "reference": result.reference_text,
        "candidate": result.candidate_text,
        "similarity": round(result.score_percent, 1),
        "grade": result.grade,
    }, ensure_ascii=False, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = load_settings(args.settings)

        if args.command == "serve":
            client = YouTubeClient(timeout=settings.request_timeout)
            translator = Translator(timeout=settings.request_timeout)
            run_server(host=args.host, port=args.port or settings.port, youtube_client=client, translator=translator)

        elif args.command == "segment":
            video_id = extract_youtube_id(args.video)
            if not video_id:
                print(f"Not a YouTube video: {args.video}", file=sys.stderr)
                return 2
            provider = LocalSegmentProvider(
                client=YouTubeClient(timeout=settings.request_timeout),
                translator=Translator(timeout=settings.request_timeout),
            )
            segment = provider.fetch_random_translated_segment(video_id, args.lang or settings.language)
            print(json.dumps({
                "original": segment.original_text,
                "translated": segment.translated_text,
                "targetLang": segment.target_lang,
                "offset": segment.offset,
                "fallback": segment.is_fallback,
            }, ensure_ascii=False, indent=2))

        elif args.command == "score":
            _print_result(compare(args.reference, args.candidate))

        elif args.command == "score-audio":
            recognizer = FasterWhisperRecognizer(model_name=args.model)
            _print_result(score_spoken_answer(args.reference, args.audio, args.lang or settings.language, recognizer))

    except (LingoPauseError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
