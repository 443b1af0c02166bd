"""
HTTP backend for the LingoPause browser extension.

A thin proxy: it fetches transcripts from YouTube, picks random segments,
forwards text to the translation endpoint and scores answers. Responses keep
the JSON shapes the extension expects ({"success": ..., ...}).
"""

import logging
import random
from typing import Optional

from flask import Flask, jsonify, request

from .errors import InvalidInputError, TranscriptNotFoundError
from .segments import pick_random_segment
from .similarity import score
from .translation import Translator
from .youtube import YouTubeClient

logger = logging.getLogger(__name__)

DEFAULT_TARGET_LANG = "es"
NOT_FOUND_MESSAGE = "No transcript found for this video"


def _failure(status: int, message: str, error: Optional[Exception] = None):
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = str(error)
    return jsonify(body), status


def create_app(
    youtube_client: Optional[YouTubeClient] = None,
    translator: Optional[Translator] = None,
    rng: Optional[random.Random] = None,
) -> Flask:
    """
    Build the Flask application.

    Args:
        youtube_client: Transcript source (default: YouTubeClient())
        translator: Translation client (default: Translator())
        rng: Random source for segment selection

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    client = youtube_client or YouTubeClient()
    translator = translator or Translator()

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/transcript/<video_id>", methods=["GET"])
    def transcript(video_id):
        logger.info(f"Fetching transcript for video: {video_id}")
        try:
            segments = client.fetch_transcript(video_id)
        except TranscriptNotFoundError:
            return _failure(404, NOT_FOUND_MESSAGE)
        except Exception as e:
            logger.error(f"Transcript fetch error: {str(e)}")
            return _failure(500, "Failed to retrieve transcript", e)

        return jsonify({
            "success": True,
            "transcript": [segment.to_dict() for segment in segments],
        })

    @app.route("/api/random-segment/<video_id>", methods=["GET"])
    def random_segment(video_id):
        target_lang = request.args.get("targetLang") or DEFAULT_TARGET_LANG
        try:
            segment = pick_random_segment(client.fetch_transcript(video_id), rng)
            translated_text = translator.translate(segment.text, target_lang)
        except TranscriptNotFoundError:
            return _failure(404, NOT_FOUND_MESSAGE)
        except Exception as e:
            logger.error(f"Random segment error: {str(e)}")
            return _failure(500, "Failed to get random segment", e)

        return jsonify({
            "success": True,
            "originalSegment": segment.to_dict(),
            "translatedText": translated_text,
            "targetLang": target_lang,
        })

    @app.route("/api/check-similarity", methods=["POST", "OPTIONS"])
    def check_similarity():
        if request.method == "OPTIONS":
            return "", 204

        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        original = body.get("original")
        spoken = body.get("spoken")

        try:
            if not isinstance(original, str) or not isinstance(spoken, str) or not original or not spoken:
                raise InvalidInputError("Both original and spoken text are required")
            similarity = score(original, spoken)
        except InvalidInputError as e:
            return _failure(400, str(e))

        return jsonify({
            "success": True,
            "similarity": similarity,
            "original": original,
            "spoken": spoken,
        })

    return app


def run_server(host: str = "0.0.0.0", port: int = 3000, **app_kwargs) -> None:
    """Create the app and serve it with Flask's built-in server."""
    app = create_app(**app_kwargs)
    logger.info(f"Server running on port {port}")
    app.run(host=host, port=port, debug=False)
