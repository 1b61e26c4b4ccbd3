# healbot/services/medicine_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from healbot.errors import NotFoundError, StorageError, ValidationError
from healbot.extensions import db
from healbot.helpers import check_length, is_db_id, optional_int_arg
from healbot.models import FamilyMember, Medicine
from healbot.services import frequency_policy
from healbot.services.schedule_generator import generate_schedules, parse_date_range
from healbot.services.schedule_lifecycle import delete_all_for_medicine
from healbot.services.time_normalizer import normalize_times, require_time_count
from healbot.utils.civil_time import civil_today

logger = logging.getLogger(__name__)

DEFAULT_TIMES = ["08:00"]


def _required_text(data, field, message):
    value = data.get(field)
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationError(message)
    return text


def create_medicine(user_id: int, data: dict) -> Medicine:
    """
    Validate a create-medicine request, insert the medicine and expand its
    dose calendar in one transaction.

    Body keys: name, dosage, unit, patient_id, frequency, times, startDate,
    endDate, customTimesCount, customStepDays (snake_case aliases accepted).
    """
    columns = Medicine.__table__.c
    name = check_length(_required_text(data, "name", "Medicine name required"), columns["name"], "Medicine name")
    dosage = check_length(_required_text(data, "dosage", "Dosage required"), columns["dosage"], "Dosage")
    unit = check_length(str(data.get("unit") or "").strip(), columns["unit"], "Unit")

    patient_id = optional_int_arg(data.get("patient_id", data.get("patientId")), "patient_id")
    if patient_id is None:
        raise ValidationError("Family member required")
    patient = FamilyMember.query.filter_by(id=patient_id, user_id=user_id).first()
    if not patient:
        raise NotFoundError("Family member not found")

    frequency = frequency_policy.normalize_frequency_id(data.get("frequency"))
    check_length(frequency, columns["frequency"], "Frequency")
    meta = frequency_policy.resolve(
        frequency,
        data.get("customTimesCount", data.get("custom_times_count")),
        data.get("customStepDays", data.get("custom_step_days")),
    )

    raw_times = data["times"] if "times" in data else DEFAULT_TIMES
    times = normalize_times(raw_times)
    require_time_count(times, meta, frequency)

    start_date, end_date = parse_date_range(
        data.get("startDate", data.get("start_date")),
        data.get("endDate", data.get("end_date")),
        today=civil_today(),
    )

    medicine = Medicine(
        user_id=user_id,
        patient_id=patient.id,
        name=name,
        dosage=dosage,
        unit=unit,
        frequency=frequency,
        start_date=start_date,
        end_date=end_date,
    )
    try:
        db.session.add(medicine)
        db.session.flush()  # medicine.id for the schedule rows
        created = generate_schedules(medicine, meta, times, start_date, end_date)
        db.session.commit()
    except (SQLAlchemyError, StorageError):
        db.session.rollback()
        logger.exception("Failed to create medicine %r for user %s", name, user_id)
        raise StorageError("Could not save medicine")

    logger.info(
        "Created medicine %s (%s) for user %s with %s schedule(s)",
        medicine.id, frequency, user_id, created,
    )
    return medicine


def list_medicines(user_id: int, patient_id=None):
    query = Medicine.query.filter_by(user_id=user_id)
    if patient_id is not None:
        query = query.filter_by(patient_id=patient_id)
    return query.order_by(Medicine.id).all()


def delete_medicine(user_id: int, medicine_id: int) -> None:
    if not is_db_id(medicine_id):
        raise NotFoundError("Medicine not found")

    medicine = Medicine.query.filter_by(id=medicine_id, user_id=user_id).first()
    if not medicine:
        raise NotFoundError("Medicine not found")

    try:
        removed = delete_all_for_medicine(medicine.id)
        db.session.delete(medicine)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete medicine %s", medicine_id)
        raise StorageError("Could not delete medicine")

    logger.info("Deleted medicine %s and %s schedule(s) for user %s", medicine_id, removed, user_id)
