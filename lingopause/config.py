"""
Settings loading for LingoPause.

Settings come from three layers, later layers winning:

1. defaults on PracticeSettings,
2. a JSON settings file (as written by save_settings or the extension popup),
3. environment variables.
"""

import json
import logging
import os
from dataclasses import asdict, fields
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidInputError
from .models import PracticeSettings
from .utils import is_language_tag

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".lingopause", "settings.json")

ENV_VARS = {
    "LINGOPAUSE_LANGUAGE": "language",
    "LINGOPAUSE_MIN_INTERVAL": "min_interval_seconds",
    "LINGOPAUSE_MAX_INTERVAL": "max_interval_seconds",
    "LINGOPAUSE_BACKEND_URL": "backend_url",
    "LINGOPAUSE_REQUEST_TIMEOUT": "request_timeout",
    "PORT": "port",
}

_INT_FIELDS = ("min_interval_seconds", "max_interval_seconds", "port")
_FLOAT_FIELDS = ("request_timeout",)


def _coerce(name: str, value: Any) -> Any:
    try:
        if name in _INT_FIELDS:
            if isinstance(value, bool):
                raise ValueError(value)
            return int(value)
        if name in _FLOAT_FIELDS:
            return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid value for {name}: {value!r}") from e
    return str(value)


def _apply(values: Dict[str, Any], updates: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(PracticeSettings)} - {"extra"}
    for key, value in updates.items():
        if key == "interval":
            # The popup stores a single interval; treat it as the upper bound.
            values["max_interval_seconds"] = _coerce("max_interval_seconds", value)
        elif key in known:
            values[key] = _coerce(key, value)
        else:
            values.setdefault("extra", {})[key] = value


def validate_settings(settings: PracticeSettings) -> PracticeSettings:
    """
    Check settings for consistency.

    Raises:
        InvalidInputError: On an unknown language tag, bad interval bounds
            or a non-positive port or timeout
    """
    if not is_language_tag(settings.language):
        raise InvalidInputError(f"Invalid language: {settings.language!r}")
    settings.schedule_config()
    if not 0 < settings.port < 65536:
        raise InvalidInputError(f"Invalid port: {settings.port}")
    if settings.request_timeout <= 0:
        raise InvalidInputError(f"Invalid request timeout: {settings.request_timeout}")
    return settings


def load_settings(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> PracticeSettings:
    """
    Load practice settings.

    Args:
        path: JSON settings file; a missing file is not an error
        environ: Environment mapping (default: os.environ)

    Returns:
        Validated PracticeSettings

    Raises:
        InvalidInputError: If the file is not valid JSON or a value is invalid
    """
    environ = os.environ if environ is None else environ
    path = path or DEFAULT_SETTINGS_PATH
    values: Dict[str, Any] = {}

    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Settings file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise InvalidInputError(f"Settings file {path} must contain a JSON object")
        _apply(values, data)
        logger.debug(f"Loaded settings from {path}")

    _apply(values, {field: environ[var] for var, field in ENV_VARS.items() if environ.get(var)})

    if values.get("max_interval_seconds") is not None and "min_interval_seconds" not in values:
        # A lone upper bound below the default lower bound shrinks the window.
        default_min = PracticeSettings().min_interval_seconds
        values["min_interval_seconds"] = min(default_min, values["max_interval_seconds"])

    return validate_settings(PracticeSettings(**values))


def save_settings(settings: PracticeSettings, path: Optional[str] = None) -> str:
    """Write settings as JSON and return the path written."""
    path = path or DEFAULT_SETTINGS_PATH
    validate_settings(settings)
    data = asdict(settings)
    extra = data.pop("extra", {})
    data.update(extra)

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved settings to {path}")
    return path
