import logging
from urllib.parse import quote
from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

errors_bp = Blueprint("errors", __name__)
logger = logging.getLogger(__name__)


def _original_url():
    """Request target as the client sent it, still percent-encoded."""
    raw = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw:
        return raw
    query = request.query_string.decode("utf-8", "replace")
    path = quote(request.path, safe="/:@!$&'()*+,;=-._~")
    return f"{path}?{query}" if query else path


@errors_bp.app_errorhandler(404)
@errors_bp.app_errorhandler(405)
def not_found(error):
    """Unmatched routes, including known paths hit with another method."""
    return jsonify({
        "error": "Not Found",
        "message": f"Route {request.method} {_original_url()} not found",
    }), 404


@errors_bp.app_errorhandler(Exception)
def internal_error(error):
    # Other HTTP errors (400 on bad JSON etc.) keep their own response
    if isinstance(error, HTTPException):
        return error

    logger.exception(f"Error occurred: {error}")
    if current_app.config.get("APP_ENV") == "development":
        message = str(error)
    else:
        message = "Something went wrong"
    return jsonify({"error": "Internal Server Error", "message": message}), 500
