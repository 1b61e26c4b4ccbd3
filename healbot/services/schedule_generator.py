# healbot/services/schedule_generator.py
"""
Expands a medicine's frequency, times of day and date range into concrete
dose rows.

Generation never commits: callers run it inside the same transaction as the
medicine insert so both land together or not at all.
"""
import datetime
import logging

from sqlalchemy.dialects import postgresql, sqlite

from healbot.errors import StorageError, ValidationError
from healbot.extensions import db
from healbot.models import Schedule, STATUS_PENDING
from healbot.utils.civil_time import parse_iso_date, parse_time_token

logger = logging.getLogger(__name__)

MAX_GENERATED_DATES = 365
INSERT_CHUNK_SIZE = 200

_CONFLICT_COLUMNS = ["medicine_id", "schedule_date", "time_of_day"]
_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def parse_date_range(start, end, today=None):
    """Resolve (start, end) with defaults; end falls back to start."""
    try:
        start_date = parse_iso_date(start) if start else today
        end_date = parse_iso_date(end) if end else start_date
    except ValidationError:
        raise ValidationError("Invalid start/end date")

    if start_date is None:
        raise ValidationError("Invalid start/end date")

    if end_date < start_date:
        raise ValidationError("End date must be on or after start date")
    return start_date, end_date


def iter_dose_dates(start_date, end_date, day_step_count, max_dates=MAX_GENERATED_DATES):
    if day_step_count < 1:
        raise ValidationError("Day step must be at least 1")

    step = datetime.timedelta(days=day_step_count)
    current = start_date
    produced = 0
    while current <= end_date and produced < max_dates:
        yield current
        produced += 1
        # stop before stepping past end_date; near date.max the step overflows
        if end_date - current < step:
            break
        current += step


def _insert_ignoring_duplicates(rows) -> int:
    dialect = db.session.get_bind().dialect.name
    insert = _DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise StorageError(f"Unsupported database dialect: {dialect}")

    created = 0
    for i in range(0, len(rows), INSERT_CHUNK_SIZE):
        stmt = (
            insert(Schedule.__table__)
            .values(rows[i:i + INSERT_CHUNK_SIZE])
            .on_conflict_do_nothing(index_elements=_CONFLICT_COLUMNS)
        )
        result = db.session.execute(stmt)
        created += max(result.rowcount or 0, 0)
    return created


def generate_schedules(medicine, meta, times, start_date, end_date) -> int:
    """
    Insert one pending schedule per (date, time) for `medicine`.

    Dates run from start_date every meta.day_step_count days up to end_date,
    capped at MAX_GENERATED_DATES dates. Rows that already exist for the
    same medicine, date and time are skipped. Returns the number of rows
    created.
    """
    if medicine.id is None:
        raise StorageError("Medicine must be flushed before generating schedules")

    start_date, end_date = parse_date_range(start_date, end_date)
    times_of_day = [parse_time_token(t) for t in times]
    dosage = medicine.dosage_display

    rows = [
        {
            "medicine_id": medicine.id,
            "schedule_date": day,
            "time_of_day": time_of_day,
            "dosage": dosage,
            "status": STATUS_PENDING,
        }
        for day in iter_dose_dates(start_date, end_date, meta.day_step_count)
        for time_of_day in times_of_day
    ]
    if not rows:
        return 0

    created = _insert_ignoring_duplicates(rows)
    logger.debug("Generated %s of %s schedule rows for medicine %s", created, len(rows), medicine.id)
    return created
