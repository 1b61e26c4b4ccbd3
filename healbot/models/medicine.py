from healbot.extensions import db
from sqlalchemy.sql import func


class Medicine(db.Model):
    __tablename__ = "medicines"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    patient_id = db.Column(db.Integer, db.ForeignKey("family_members.id", ondelete="CASCADE"), nullable=False, index=True)

    name = db.Column(db.String(120), nullable=False)
    dosage = db.Column(db.String(60), nullable=False)     # e.g. "500"
    unit = db.Column(db.String(20), nullable=True)        # e.g. "mg"
    frequency = db.Column(db.String(30), nullable=False, server_default="ONCE_DAILY")

    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        db.CheckConstraint("end_date >= start_date", name="ck_medicines_date_range"),
        db.Index("ix_medicines_user_patient", "user_id", "patient_id"),
    )

    @property
    def dosage_display(self) -> str:
        return f"{self.dosage} {self.unit or ''}".strip()

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "patient_id": self.patient_id,
            "name": self.name,
            "dosage": self.dosage,
            "unit": self.unit,
            "frequency": self.frequency,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }
