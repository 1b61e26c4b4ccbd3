from flask import current_app, request, jsonify
from flask_jwt_extended import jwt_required
from healbot.errors import ValidationError
from healbot.extensions import db
from healbot.helpers import check_length, current_user_id
from healbot.models import FamilyMember
from healbot.services import schedule_lifecycle


def _clean(value, column=None, field=None):
    text = str(value).strip() if value is not None else ""
    if column is not None:
        check_length(text, FamilyMember.__table__.c[column], field or column)
    return text or None


def _optional_age(value):
    if value in (None, ""):
        return None
    try:
        age = int(value)
    except (ValueError, TypeError):
        raise ValidationError("Please enter a valid age")
    if age < 0 or age > 150:
        raise ValidationError("Please enter a valid age")
    return age


@jwt_required()
def list_family_members():
    user_id = current_user_id()
    members = FamilyMember.query.filter_by(user_id=user_id).order_by(FamilyMember.id).all()
    return jsonify({"success": True, "family_members": [m.to_dict() for m in members]}), 200


@jwt_required()
def add_family_member():
    user_id = current_user_id()
    data = request.get_json(silent=True) or {}

    name = _clean(data.get("name"), "name", "Name")
    if not name:
        return jsonify({"success": False, "message": "Name required"}), 400

    age = _optional_age(data.get("age"))
    member = FamilyMember(
        user_id=user_id,
        name=name,
        relationship=_clean(data.get("relationship"), "relationship", "Relationship"),
        age=age,
        blood_type=_clean(data.get("bloodType", data.get("blood_type")), "blood_type", "Blood type"),
        phone=_clean(data.get("phone"), "phone", "Phone"),
        emergency=_clean(data.get("emergency"), "emergency", "Emergency contact"),
        history=_clean(data.get("history")),
    )
    db.session.add(member)
    db.session.commit()
    current_app.logger.info(f"Added family member {member.id} for user {user_id}")

    return jsonify({"success": True, "message": "Family member added", "family_member": member.to_dict()}), 201


@jwt_required()
def delete_family_member(member_id):
    schedule_lifecycle.delete_all_for_patient(current_user_id(), member_id)
    return jsonify({"success": True, "message": "Family member deleted"}), 200
