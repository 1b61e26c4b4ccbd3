from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from healbot.extensions import db
from healbot.helpers import api_response

health_bp = Blueprint('health', __name__, url_prefix="/api/v1")


@health_bp.route('/health')
def health_check():
    try:
        db.session.execute(text('SELECT 1'))
        return api_response(
            success=True,
            message="Database connection successful",
            data={"status": "connected"}
        )
    except SQLAlchemyError:
        current_app.logger.exception("Health check database query failed")
        return api_response(
            success=False,
            message="Database connection failed",
            data={"status": "disconnected"},
            status_code=500
        )
