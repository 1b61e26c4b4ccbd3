from healbot.extensions import db
from healbot.utils.civil_time import compose_instant, format_instant, format_time

STATUS_PENDING = "pending"
STATUS_TAKEN = "taken"


class Schedule(db.Model):
    """One dose instance of a medicine on a given date and time of day."""

    __tablename__ = "schedules"
    id = db.Column(db.Integer, primary_key=True)
    medicine_id = db.Column(db.Integer, db.ForeignKey("medicines.id", ondelete="CASCADE"), nullable=False, index=True)

    schedule_date = db.Column(db.Date, nullable=False, index=True)
    time_of_day = db.Column(db.Time(timezone=False), nullable=False)
    dosage = db.Column(db.String(90), nullable=True)      # "500 mg", snapshot at generation

    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING, server_default=STATUS_PENDING)
    taken_at = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("medicine_id", "schedule_date", "time_of_day", name="uq_schedules_medicine_date_time"),
        db.CheckConstraint("status IN ('pending', 'taken')", name="ck_schedules_status"),
    )

    @property
    def scheduled_at(self):
        return compose_instant(self.schedule_date, self.time_of_day)

    def to_dict(self):
        return {
            "id": self.id,
            "medicine_id": self.medicine_id,
            "schedule_date": self.schedule_date.isoformat(),
            "time": format_time(self.time_of_day),
            "scheduled_at": format_instant(self.scheduled_at),
            "dosage": self.dosage,
            "status": self.status,
            "taken_at": format_instant(self.taken_at),
        }
