import pytest

from lingopause.utils import is_language_tag, primary_language, timestamp_to_seconds


def test_timestamp_to_seconds():
    assert timestamp_to_seconds("00:01:30.500") == 90.5
    assert timestamp_to_seconds("01:30.500") == 90.5
    assert timestamp_to_seconds("100:00:00.000") == 360000


@pytest.mark.parametrize("tag,expected", [("es-ES", "es"), ("pt_BR", "pt"), ("FR", "fr"), ("zh-Hant-TW", "zh")])
def test_primary_language(tag, expected):
    assert primary_language(tag) == expected


def test_is_language_tag():
    assert is_language_tag("es")
    assert is_language_tag("en-US")
    assert not is_language_tag("")
    assert not is_language_tag("english please")
