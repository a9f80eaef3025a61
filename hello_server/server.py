"""Serving the app with graceful shutdown.

The server is a single-threaded Werkzeug WSGI server: requests are handled
one after another, and the serve loop only checks its shutdown flag between
requests, so a response in progress always finishes before the socket is
closed.
"""

import logging
import signal
import sys
import threading

from werkzeug.serving import make_server

from hello_server import create_app

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
    )


def build_server(app, host, port):
    return make_server(host, port, app, threaded=False)


def make_shutdown_handler(server):
    """Return a signal handler that stops ``server`` without blocking.

    ``shutdown()`` waits for ``serve_forever`` to return, and the handler
    runs on the serving thread, so the call is made from a helper thread.
    """

    def handle(signum, frame):
        logger.info(f"{signal.Signals(signum).name} received, shutting down gracefully...")
        threading.Thread(target=server.shutdown, name="shutdown", daemon=True).start()

    return handle


def install_shutdown_handlers(server, signals=SHUTDOWN_SIGNALS):
    handler = make_shutdown_handler(server)
    for sig in signals:
        signal.signal(sig, handler)
    return handler


def serve(app, host, port, server=None):
    """Run until a shutdown signal arrives, then close the listening socket."""
    server = server or build_server(app, host, port)
    install_shutdown_handlers(server)

    logger.info(f"🚀 Server running on port {port}")
    logger.info(f"📋 Health check available at http://localhost:{port}/health")
    try:
        server.serve_forever()
    finally:
        server.server_close()
        logger.info("Server closed")


def main():
    try:
        app = create_app()
    except ValueError:
        logger.exception(" Invalid configuration:")
        sys.exit(1)

    configure_logging(app.config["LOG_LEVEL"])
    # The request logger replaces werkzeug's access log
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logger.info(" Flask app starting...")
    try:
        serve(app, app.config["HOST"], app.config["PORT"])
    except Exception:
        logger.exception(" Flask crashed:")
        sys.exit(1)
    sys.exit(0)
