# healbot/routes/schedule_routes.py
from flask import Blueprint
from healbot.controllers import schedule_controller

schedule_bp = Blueprint("schedules", __name__, url_prefix="/api/v1/schedules")

schedule_bp.route("", methods=["GET"])(schedule_controller.list_schedules)
schedule_bp.route("/<int:schedule_id>/taken", methods=["PUT"])(schedule_controller.mark_taken)
schedule_bp.route("/<int:schedule_id>", methods=["DELETE"])(schedule_controller.delete_schedule)
