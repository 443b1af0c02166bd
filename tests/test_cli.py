import json
from unittest import mock

import pytest

from lingopause import cli
from lingopause.config import ENV_VARS
from lingopause.models import TranslatedSegment


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_score_command(capsys, tmp_path):
    exit_code = cli.main(["--settings", str(tmp_path / "none.json"), "score", "kitten", "sitting"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["similarity"] == 57.1
    assert output["grade"] == "poor"


def test_segment_command(capsys, tmp_path):
    segment = TranslatedSegment(original_text="Hello", translated_text="Hola", target_lang="es-ES", offset=3.0)
    with mock.patch.object(cli.LocalSegmentProvider, "fetch_random_translated_segment", return_value=segment) as fetch:
        exit_code = cli.main([
            "--settings", str(tmp_path / "none.json"),
            "segment", "https://youtu.be/dQw4w9WgXcQ", "--lang", "es-ES",
        ])

    assert exit_code == 0
    fetch.assert_called_once_with("dQw4w9WgXcQ", "es-ES")
    output = json.loads(capsys.readouterr().out)
    assert output == {
        "original": "Hello",
        "translated": "Hola",
        "targetLang": "es-ES",
        "offset": 3.0,
        "fallback": False,
    }


def test_segment_command_rejects_non_youtube(tmp_path):
    assert cli.main(["--settings", str(tmp_path / "none.json"), "segment", "https://example.com/x"]) == 2


def test_serve_command_uses_settings_port(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"port": 4321}), encoding="utf-8")
    with mock.patch.object(cli, "run_server") as run_server:
        assert cli.main(["--settings", str(path), "serve"]) == 0

    assert run_server.call_args.kwargs["port"] == 4321


def test_invalid_settings_exit_code(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"min_interval_seconds": 100, "max_interval_seconds": 1}), encoding="utf-8")
    assert cli.main(["--settings", str(path), "score", "a", "b"]) == 1
