# healbot/utils/civil_time.py
"""
Calendar and time-of-day helpers for the service's single civil timezone.

Every place that turns a (date, time) pair into one comparable instant goes
through compose_instant(); stored timestamps are naive datetimes expressed in
the configured APP_TIMEZONE.
"""
import datetime
from zoneinfo import ZoneInfo

from flask import current_app, has_app_context

from healbot.errors import ValidationError

DEFAULT_TIMEZONE = "UTC"
TIME_FORMATS = ("%H:%M:%S", "%H:%M")


def civil_zone() -> ZoneInfo:
    name = DEFAULT_TIMEZONE
    if has_app_context():
        name = current_app.config.get("APP_TIMEZONE") or DEFAULT_TIMEZONE
    return ZoneInfo(name)


def civil_now() -> datetime.datetime:
    return datetime.datetime.now(civil_zone()).replace(tzinfo=None, microsecond=0)


def civil_today() -> datetime.date:
    return civil_now().date()


def compose_instant(day: datetime.date, time_of_day: datetime.time) -> datetime.datetime:
    return datetime.datetime.combine(day, time_of_day)


def parse_iso_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    text = str(value).strip()
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        pass
    # full timestamps are accepted and truncated to their date
    try:
        return datetime.datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value}")


def parse_time_token(value) -> datetime.time:
    if isinstance(value, datetime.time):
        return value.replace(microsecond=0)
    token = str(value).strip()
    for fmt in TIME_FORMATS:
        try:
            return datetime.datetime.strptime(token, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time: {value}")


def format_time(value: datetime.time) -> str:
    # seconds only when they carry information
    if value.second:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")


def format_instant(value):
    if value is None:
        return None
    return value.isoformat(timespec="seconds")
