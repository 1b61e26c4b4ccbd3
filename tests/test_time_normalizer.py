import pytest

from healbot.errors import ValidationError
from healbot.services.frequency_policy import FrequencyMeta
from healbot.services.time_normalizer import normalize_times, require_time_count


def test_single_value_becomes_list():
    assert normalize_times("08:00") == ["08:00"]


def test_none_gives_empty_list():
    assert normalize_times(None) == []


def test_empty_entries_are_dropped():
    assert normalize_times(["", None, "  ", "21:30"]) == ["21:30"]


def test_duplicates_collapse_on_canonical_value():
    assert normalize_times(["08:00", "8:00", "08:00:00", "20:00"]) == ["08:00", "20:00"]


def test_seconds_are_kept_when_non_zero():
    assert normalize_times(["07:15:30"]) == ["07:15:30"]


def test_entries_are_truncated_to_eight_characters():
    assert normalize_times(["09:45:00.123456"]) == ["09:45"]


def test_unparsable_time_is_rejected():
    with pytest.raises(ValidationError, match="Invalid time"):
        normalize_times(["noon"])


def test_out_of_range_time_is_rejected():
    with pytest.raises(ValidationError):
        normalize_times(["25:00"])


def test_count_mismatch_names_frequency():
    with pytest.raises(ValidationError, match=r"Frequency TWICE_DAILY requires 2 time\(s\)"):
        require_time_count(["08:00"], FrequencyMeta(2, 1), "TWICE_DAILY")


def test_collapsed_duplicates_count_as_mismatch():
    times = normalize_times(["08:00", "08:00"])
    with pytest.raises(ValidationError):
        require_time_count(times, FrequencyMeta(2, 1), "TWICE_DAILY")


def test_matching_count_passes():
    require_time_count(["08:00", "20:00"], FrequencyMeta(2, 1), "TWICE_DAILY")
