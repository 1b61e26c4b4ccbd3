# healbot/services/history_projection.py
from healbot.extensions import db
from healbot.models import FamilyMember, Medicine, Schedule, STATUS_TAKEN
from healbot.utils.civil_time import format_instant, format_time


def effective_event_time(schedule):
    """When the dose actually happened if taken, otherwise when it was due."""
    if schedule.status == STATUS_TAKEN and schedule.taken_at is not None:
        return schedule.taken_at
    return schedule.scheduled_at


def query_history(user_id, patient_id=None):
    """
    Every dose of the user's medicines (optionally one family member), newest
    event first; ties go to the higher schedule id.
    """
    query = (
        db.session.query(Schedule, Medicine, FamilyMember.name)
        .join(Medicine, Schedule.medicine_id == Medicine.id)
        .outerjoin(FamilyMember, FamilyMember.id == Medicine.patient_id)
        .filter(Medicine.user_id == user_id)
    )
    if patient_id is not None:
        query = query.filter(Medicine.patient_id == patient_id)

    entries = []
    for schedule, medicine, patient_name in query.all():
        event_at = effective_event_time(schedule)
        entries.append((event_at, schedule.id, {
            "id": schedule.id,
            "status": schedule.status,
            "time": format_time(schedule.time_of_day),
            "taken_at": format_instant(schedule.taken_at),
            "scheduled_at": format_instant(schedule.scheduled_at),
            "event_at": format_instant(event_at),
            "medicine_id": medicine.id,
            "patient_id": medicine.patient_id,
            "patient_name": patient_name,
            "medicine": medicine.name,
            "frequency": medicine.frequency,
            "dosage": schedule.dosage,
        }))

    # composed instants are not portable SQL, so order in Python
    entries.sort(key=lambda e: (e[0], e[1]), reverse=True)
    return [row for _, _, row in entries]
