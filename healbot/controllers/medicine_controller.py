from flask import request, jsonify
from flask_jwt_extended import jwt_required
from healbot.helpers import current_user_id, optional_int_arg
from healbot.services import medicine_service


@jwt_required()
def list_medicines():
    user_id = current_user_id()
    patient_id = optional_int_arg(request.args.get("patient_id"), "patient_id")
    medicines = medicine_service.list_medicines(user_id, patient_id)
    return jsonify({"success": True, "medicines": [m.to_dict() for m in medicines]}), 200


@jwt_required()
def add_medicine():
    """
    Create a medicine and its dose calendar.

    Body: name, dosage, unit, patient_id, frequency (default ONCE_DAILY),
    times (default ["08:00"]), startDate, endDate, and for CUSTOM
    customTimesCount + customStepDays.
    """
    user_id = current_user_id()
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "message": "JSON data required"}), 400

    medicine = medicine_service.create_medicine(user_id, data)
    return jsonify({"success": True, "message": "Medicine added", "medicine": medicine.to_dict()}), 201


@jwt_required()
def delete_medicine(medicine_id):
    medicine_service.delete_medicine(current_user_id(), medicine_id)
    return jsonify({"success": True, "message": "Medicine deleted"}), 200
