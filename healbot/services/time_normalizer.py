# healbot/services/time_normalizer.py
from healbot.errors import ValidationError
from healbot.utils.civil_time import format_time, parse_time_token

TIME_TOKEN_LENGTH = 8   # "HH:MM:SS"


def normalize_times(raw_times):
    """
    Turn caller-supplied times into distinct canonical "HH:MM[:SS]" tokens.

    A single value is treated as a one-element list. Empty entries are
    dropped; "08:00" and "08:00:00" collapse into one token.
    """
    if raw_times is None:
        return []
    if not isinstance(raw_times, (list, tuple, set)):
        raw_times = [raw_times]

    seen = set()
    tokens = []
    for item in raw_times:
        if not item:
            continue
        token = str(item).strip()[:TIME_TOKEN_LENGTH]
        if not token:
            continue
        canonical = format_time(parse_time_token(token))
        if canonical not in seen:
            seen.add(canonical)
            tokens.append(canonical)
    return tokens


def require_time_count(times, meta, frequency_id):
    if len(times) != meta.required_time_count:
        raise ValidationError(
            f"Frequency {frequency_id} requires {meta.required_time_count} time(s)"
        )
