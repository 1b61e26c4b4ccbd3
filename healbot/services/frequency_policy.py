# healbot/services/frequency_policy.py
import logging
from typing import NamedTuple

from healbot.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY = "ONCE_DAILY"
CUSTOM_FREQUENCY = "CUSTOM"

CUSTOM_TIMES_RANGE = (1, 6)
CUSTOM_STEP_RANGE = (1, 30)


class FrequencyMeta(NamedTuple):
    required_time_count: int
    day_step_count: int


FREQUENCY_TABLE = {
    "ONCE_DAILY": FrequencyMeta(1, 1),
    "TWICE_DAILY": FrequencyMeta(2, 1),
    "THRICE_DAILY": FrequencyMeta(3, 1),
    "ONCE_WEEKLY": FrequencyMeta(1, 7),
    "TWICE_WEEKLY": FrequencyMeta(2, 7),
}


def normalize_frequency_id(frequency_id) -> str:
    value = str(frequency_id or "").strip().upper()
    return value or DEFAULT_FREQUENCY


def _strict_int(value):
    """int(value) for whole numbers only; None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def resolve(frequency_id, custom_times_count=None, custom_step_days=None) -> FrequencyMeta:
    """
    Map a frequency identifier to how many times per day a dose is due and
    how many calendar days separate dose days.

    CUSTOM takes both numbers from the caller; unknown identifiers fall back
    to once-daily.
    """
    freq = normalize_frequency_id(frequency_id)

    if freq == CUSTOM_FREQUENCY:
        times = _strict_int(custom_times_count)
        lo, hi = CUSTOM_TIMES_RANGE
        if times is None or not lo <= times <= hi:
            raise ValidationError(f"Custom frequency: times per day must be {lo}-{hi}")

        step = _strict_int(custom_step_days)
        lo, hi = CUSTOM_STEP_RANGE
        if step is None or not lo <= step <= hi:
            raise ValidationError(f"Custom frequency: repeat days must be {lo}-{hi}")

        return FrequencyMeta(times, step)

    meta = FREQUENCY_TABLE.get(freq)
    if meta is None:
        logger.warning("Unknown frequency %r, using %s", frequency_id, DEFAULT_FREQUENCY)
        return FREQUENCY_TABLE[DEFAULT_FREQUENCY]
    return meta
