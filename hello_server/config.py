import logging
import os
from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def _parse_port(raw):
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid PORT value: {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def _parse_log_level(raw):
    level = str(raw).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid LOG_LEVEL value: {raw!r}")
    return level


def load_config(environ=None):
    """Read server settings from the environment (and a .env file, if any).

    Args:
        environ (Mapping, optional): Environment to read instead of os.environ.
            When given, no .env file is loaded.

    Returns:
        dict: Flask config keys PORT, HOST, APP_ENV, LOG_LEVEL and SWAGGER.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return {
        "PORT": _parse_port(environ.get("PORT", DEFAULT_PORT)),
        "HOST": environ.get("HOST", DEFAULT_HOST),
        "APP_ENV": environ.get("APP_ENV", "production"),
        "LOG_LEVEL": _parse_log_level(environ.get("LOG_LEVEL", "INFO")),
        "SWAGGER": {
            "title": "Hello Server API",
            "uiversion": 3,
        },
    }
