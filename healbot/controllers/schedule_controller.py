from flask import request, jsonify
from flask_jwt_extended import jwt_required
from healbot.helpers import current_user_id
from healbot.services import schedule_lifecycle
from healbot.utils.civil_time import parse_iso_date


@jwt_required()
def list_schedules():
    """GET ?date=YYYY-MM-DD for one day, ?from=YYYY-MM-DD for everything after it."""
    user_id = current_user_id()
    day = request.args.get("date")
    after = request.args.get("from")

    if day:
        rows = schedule_lifecycle.list_by_date(user_id, parse_iso_date(day))
    elif after:
        rows = schedule_lifecycle.list_from(user_id, parse_iso_date(after))
    else:
        rows = schedule_lifecycle.list_all(user_id)

    return jsonify({"success": True, "schedules": rows}), 200


@jwt_required()
def mark_taken(schedule_id):
    schedule = schedule_lifecycle.mark_taken(current_user_id(), schedule_id)
    return jsonify({"success": True, "message": "Marked as taken", "schedule": schedule.to_dict()}), 200


@jwt_required()
def delete_schedule(schedule_id):
    schedule_lifecycle.delete_one(current_user_id(), schedule_id)
    return jsonify({"success": True, "message": "Schedule deleted"}), 200
