# healbot/routes/family_routes.py
from flask import Blueprint
from healbot.controllers import family_controller

family_bp = Blueprint("family_members", __name__, url_prefix="/api/v1/family-members")

family_bp.route("", methods=["GET"])(family_controller.list_family_members)
family_bp.route("", methods=["POST"])(family_controller.add_family_member)
family_bp.route("/<int:member_id>", methods=["DELETE"])(family_controller.delete_family_member)
