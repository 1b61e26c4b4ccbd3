from healbot.extensions import db
from sqlalchemy.sql import func


class FamilyMember(db.Model):
    """A patient looked after by the account holder."""

    __tablename__ = "family_members"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = db.Column(db.String(120), nullable=False)
    relationship = db.Column(db.String(60), nullable=True)   # e.g. "Mother"
    age = db.Column(db.Integer, nullable=True)
    blood_type = db.Column(db.String(10), nullable=True)
    phone = db.Column(db.String(40), nullable=True)
    emergency = db.Column(db.String(120), nullable=True)     # emergency contact
    history = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "relationship": self.relationship,
            "age": self.age,
            "blood_type": self.blood_type,
            "phone": self.phone,
            "emergency": self.emergency,
            "history": self.history,
        }
