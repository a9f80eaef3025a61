from flask import Blueprint, current_app, jsonify
from hello_server.services import utc_timestamp

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    """Basic health check.
    ---
    tags:
      - health
    responses:
      200:
        description: Server is up
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            timestamp:
              type: string
              format: date-time
            uptime:
              type: number
              description: Seconds since the server started
    """
    return jsonify({
        "status": "ok",
        "timestamp": utc_timestamp(),
        "uptime": current_app.extensions["uptime"].seconds(),
    }), 200
