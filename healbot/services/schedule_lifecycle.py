# healbot/services/schedule_lifecycle.py
"""
Reads and state changes for individual dose rows.

Schedules carry no user id of their own; every query authorises through the
owning medicine (Schedule.medicine_id -> Medicine.user_id).
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from healbot.errors import NotFoundError, StorageError
from healbot.extensions import db
from healbot.helpers import is_db_id
from healbot.models import FamilyMember, Medicine, Schedule, STATUS_TAKEN
from healbot.utils.civil_time import civil_now

logger = logging.getLogger(__name__)


def _owned_medicine_ids(user_id):
    return db.select(Medicine.id).where(Medicine.user_id == user_id)


def _schedule_rows(user_id, *criteria):
    query = (
        db.session.query(Schedule, Medicine.name, Medicine.patient_id)
        .join(Medicine, Schedule.medicine_id == Medicine.id)
        .filter(Medicine.user_id == user_id, *criteria)
        .order_by(Schedule.schedule_date.asc(), Schedule.time_of_day.asc(), Schedule.id.asc())
    )
    rows = []
    for schedule, medicine_name, patient_id in query.all():
        row = schedule.to_dict()
        row["medicine_name"] = medicine_name
        row["patient_id"] = patient_id
        rows.append(row)
    return rows


def list_by_date(user_id, day):
    """Doses due on `day`, earliest first."""
    return _schedule_rows(user_id, Schedule.schedule_date == day)


def list_from(user_id, day):
    """Doses on dates strictly after `day`, earliest first."""
    return _schedule_rows(user_id, Schedule.schedule_date > day)


def list_all(user_id):
    return _schedule_rows(user_id)


def mark_taken(user_id, schedule_id) -> Schedule:
    """
    Stamp a schedule as taken now. Already-taken rows are re-stamped.

    Ownership and existence are checked by the UPDATE itself, so a row
    deleted concurrently reports NotFoundError instead of a stale success.
    """
    if not is_db_id(schedule_id):
        raise NotFoundError("Schedule not found")

    try:
        updated = (
            Schedule.query
            .filter(Schedule.id == schedule_id, Schedule.medicine_id.in_(_owned_medicine_ids(user_id)))
            .update({"status": STATUS_TAKEN, "taken_at": civil_now()}, synchronize_session=False)
        )
        if not updated:
            db.session.rollback()
            raise NotFoundError("Schedule not found")

        schedule = db.session.get(Schedule, schedule_id, populate_existing=True)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to mark schedule %s as taken", schedule_id)
        raise StorageError("Could not update schedule")
    return schedule


def delete_one(user_id, schedule_id) -> None:
    if not is_db_id(schedule_id):
        raise NotFoundError("Schedule not found")

    try:
        deleted = (
            Schedule.query
            .filter(Schedule.id == schedule_id, Schedule.medicine_id.in_(_owned_medicine_ids(user_id)))
            .delete(synchronize_session=False)
        )
        if not deleted:
            db.session.rollback()
            raise NotFoundError("Schedule not found")
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete schedule %s", schedule_id)
        raise StorageError("Could not delete schedule")

    logger.info("Deleted schedule %s for user %s", schedule_id, user_id)


def delete_all_for_medicine(medicine_id) -> int:
    """Remove every schedule of one medicine. Does not commit."""
    return Schedule.query.filter_by(medicine_id=medicine_id).delete(synchronize_session=False)


def delete_all_for_patient(user_id, patient_id) -> None:
    """
    Delete a family member together with their medicines and schedules,
    children first, in a single transaction.
    """
    if not is_db_id(patient_id):
        raise NotFoundError("Family member not found")

    patient = FamilyMember.query.filter_by(id=patient_id, user_id=user_id).first()
    if not patient:
        raise NotFoundError("Family member not found")

    medicine_ids = (
        db.select(Medicine.id)
        .where(Medicine.user_id == user_id, Medicine.patient_id == patient_id)
    )
    try:
        schedules = (
            Schedule.query
            .filter(Schedule.medicine_id.in_(medicine_ids))
            .delete(synchronize_session=False)
        )
        medicines = (
            Medicine.query
            .filter_by(user_id=user_id, patient_id=patient_id)
            .delete(synchronize_session=False)
        )
        db.session.delete(patient)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete family member %s", patient_id)
        raise StorageError("Could not delete family member")

    logger.info(
        "Deleted family member %s with %s medicine(s) and %s schedule(s) for user %s",
        patient_id, medicines, schedules, user_id,
    )
