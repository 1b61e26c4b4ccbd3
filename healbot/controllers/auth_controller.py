from flask import current_app, jsonify, request
from sqlalchemy.exc import IntegrityError
from flask_jwt_extended import create_access_token
from healbot.extensions import db
from healbot.models.user import User

MIN_PASSWORD_LENGTH = 6


def _token_response(user, message, status_code):
    access_token = create_access_token(identity=str(user.id))
    return jsonify({
        "success": True,
        "message": message,
        "user": user.to_dict(),
        "access_token": access_token
    }), status_code


def register():
    data = request.get_json(silent=True) or {}
    name     = (data.get("name") or "").strip()
    email    = (data.get("email") or "").lower().strip()
    password = data.get("password")

    if not all([name, email, password]):
        return jsonify({"success": False, "message": "All fields required"}), 400
    if len(password) < MIN_PASSWORD_LENGTH:
        return jsonify({"success": False, "message": "Password too short"}), 400

    user = User(name=name, email=email)
    user.set_password(password)
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"success": False, "message": "Email already registered"}), 409

    current_app.logger.info(f"Registered user {user.id}")
    return _token_response(user, "User registered", 201)


def login():
    data = request.get_json(silent=True) or {}
    email = (data.get("email") or "").lower().strip()
    password = data.get("password")

    if not email or not password:
        return jsonify({"message": "Email and password required", "success": False}), 400

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        return jsonify({"message": "Invalid credentials", "success": False}), 401

    return _token_response(user, "Login successful", 200)
