# healbot/routes/history_routes.py
from flask import Blueprint
from healbot.controllers import history_controller

history_bp = Blueprint("history", __name__, url_prefix="/api/v1/history")

history_bp.route("", methods=["GET"])(history_controller.get_history)
