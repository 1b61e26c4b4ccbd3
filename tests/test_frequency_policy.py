import pytest

from healbot.errors import ValidationError
from healbot.services.frequency_policy import FrequencyMeta, resolve


@pytest.mark.parametrize("frequency, expected", [
    ("ONCE_DAILY", FrequencyMeta(1, 1)),
    ("TWICE_DAILY", FrequencyMeta(2, 1)),
    ("THRICE_DAILY", FrequencyMeta(3, 1)),
    ("ONCE_WEEKLY", FrequencyMeta(1, 7)),
    ("TWICE_WEEKLY", FrequencyMeta(2, 7)),
])
def test_fixed_table(frequency, expected):
    assert resolve(frequency) == expected


def test_identifier_is_trimmed_and_case_insensitive():
    assert resolve("  twice_daily ") == FrequencyMeta(2, 1)


def test_missing_identifier_defaults_to_once_daily():
    assert resolve(None) == FrequencyMeta(1, 1)
    assert resolve("") == FrequencyMeta(1, 1)


def test_unknown_identifier_falls_back_to_once_daily(caplog):
    assert resolve("EVERY_FULL_MOON") == FrequencyMeta(1, 1)
    assert "Unknown frequency" in caplog.text


def test_custom_uses_caller_values():
    assert resolve("CUSTOM", 4, 3) == FrequencyMeta(4, 3)


def test_custom_accepts_numeric_strings():
    assert resolve("CUSTOM", "2", "10") == FrequencyMeta(2, 10)


@pytest.mark.parametrize("times", [0, 7, None, "abc", 1.5, True])
def test_custom_rejects_bad_times_per_day(times):
    with pytest.raises(ValidationError, match="times per day must be 1-6"):
        resolve("CUSTOM", times, 1)


@pytest.mark.parametrize("step", [0, 31, None, "x", 2.5])
def test_custom_rejects_bad_repeat_days(step):
    with pytest.raises(ValidationError, match="repeat days must be 1-30"):
        resolve("CUSTOM", 1, step)


def test_custom_bounds_are_inclusive():
    assert resolve("CUSTOM", 1, 1) == FrequencyMeta(1, 1)
    assert resolve("CUSTOM", 6, 30) == FrequencyMeta(6, 30)
