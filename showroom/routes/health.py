"""Liveness endpoint."""

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from showroom.extensions import db
from showroom.utils.responses import success

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """Report whether the database answers a trivial query."""
    try:
        db.session.execute(text('SELECT 1'))
        database = 'ok'
    except SQLAlchemyError as exc:
        current_app.logger.error('Health check database error: %s', exc)
        database = 'unavailable'
    return success({'backend': 'ok', 'database': database})
