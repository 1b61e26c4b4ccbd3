from flask import request, jsonify
from flask_jwt_extended import jwt_required
from healbot.helpers import current_user_id, optional_int_arg
from healbot.services.history_projection import query_history


@jwt_required()
def get_history():
    user_id = current_user_id()
    patient_id = optional_int_arg(request.args.get("patient_id"), "patient_id")
    return jsonify({"success": True, "history": query_history(user_id, patient_id)}), 200
