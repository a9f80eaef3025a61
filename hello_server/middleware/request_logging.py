"""Request logging with timing and route identification.

Every request gets a short random id and two log lines: one when it starts
and one when the response has been sent, carrying the status code, the
elapsed milliseconds and a coarse route class (HOME, API or PAGE).
"""

import logging
import random
import string
import time
from functools import wraps

from flask import g, request

from hello_server.services.uptime import utc_timestamp

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def random_request_id(length=13):
    """Short base-36 id for tracing requests in the log. Not guaranteed unique."""
    return "".join(random.choices(_ID_ALPHABET, k=length))


def classify_route(path):
    if path == "/":
        return "HOME"
    if path.startswith("/api/"):
        return "API"
    return "PAGE"


class RequestLogger:
    """Flask extension that logs the start and end of every request.

    Args:
        app: Optional Flask app to bind to immediately.
        id_generator: Zero-argument callable returning the next request id.
        clock: Monotonic clock in seconds used to time requests.
    """

    def __init__(self, app=None, id_generator=None, clock=None):
        self.id_generator = id_generator or random_request_id
        self.clock = clock or time.monotonic
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self._before_request)
        app.after_request(self._after_request)
        app.extensions["request_logger"] = self

    def start(self, method, path):
        """Log the start of a request and return its id."""
        request_id = self.id_generator()
        logger.info(f"🚀 [{utc_timestamp()}] [{request_id}] {method} {path} - Started")
        return request_id

    def finish(self, request_id, method, path, status_code, started_at=None):
        """Log the end of a request. A missing start time reports 0ms."""
        duration = 0
        if started_at is not None:
            duration = int(round((self.clock() - started_at) * 1000))
        route_type = classify_route(path)
        logger.info(
            f"✅ [{utc_timestamp()}] [{request_id}] {method} {path} - "
            f"{status_code} ({duration}ms) {route_type}"
        )
        return duration

    def _before_request(self):
        g.request_started_at = self.clock()
        g.request_id = self.start(request.method, request.path)

    def _after_request(self, response):
        request_id = g.get("request_id") or self.id_generator()
        started_at = g.get("request_started_at")
        method, path = request.method, request.path

        # Runs once the WSGI server has finished sending the body.
        response.call_on_close(
            lambda: self.finish(request_id, method, path, response.status_code, started_at)
        )
        return response


def log_route_marker(route_name):
    """Decorator that logs which named handler is serving the request."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            logger.info(f"⭐ Route Handler: {route_name} - Processing request")
            return view(*args, **kwargs)

        return wrapper

    return decorator
