# healbot/routes/medicine_routes.py
from flask import Blueprint
from healbot.controllers import medicine_controller

medicine_bp = Blueprint("medicines", __name__, url_prefix="/api/v1/medicines")

medicine_bp.route("", methods=["GET"])(medicine_controller.list_medicines)
medicine_bp.route("", methods=["POST"])(medicine_controller.add_medicine)
medicine_bp.route("/<int:medicine_id>", methods=["DELETE"])(medicine_controller.delete_medicine)
