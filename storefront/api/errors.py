"""
api.errors - JSON error handlers for the API blueprint.
"""

from flask import jsonify

from storefront.api import api_bp
from storefront.services.exceptions import DatabaseError
from storefront.services.logging_utils import get_service_logger

logger = get_service_logger("api")


@api_bp.errorhandler(DatabaseError)
def api_store_error(e):
    logger.error(f"store call failed: {e}")
    return jsonify({"error": "internal server error"}), 500


@api_bp.app_errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.app_errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
