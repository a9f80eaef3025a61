"""Landing page data and rendering.

The page is a Jinja2 template shipped inside the package. Rendering does not
need a Flask application context, so it can be called (and tested) on its
own. Autoescaping is on: every value placed into the page is HTML-escaped.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from jinja2 import Environment, PackageLoader, select_autoescape

from .uptime import format_uptime, utc_timestamp


@dataclass(frozen=True)
class Endpoint:
    """One row of the endpoint list shown on the landing page."""

    path: str
    method: str
    description: str


@dataclass(frozen=True)
class ServerInfo:
    """Live server state captured for a single render.

    Attributes:
        uptime: Seconds since the server started (>= 0).
        timestamp: ISO-8601 UTC timestamp of the snapshot.
        runtime_version: Interpreter version string, e.g. ``Python 3.12.1``.
        environment: Deployment environment name.
    """

    uptime: float
    timestamp: str
    runtime_version: str
    environment: str


@dataclass(frozen=True)
class HomePageData:
    title: str
    server_info: ServerInfo
    endpoints: Tuple[Endpoint, ...] = ()


DEFAULT_ENDPOINTS = (
    Endpoint(path="/", method="GET", description="Landing page with live server status"),
    Endpoint(path="/health", method="GET", description="Health check returning status, timestamp and uptime as JSON"),
)


def format_local_timestamp(iso_timestamp: str) -> str:
    """Render an ISO timestamp as ``M/D/YYYY, h:MM:SS AM`` in local time."""
    moment = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00")).astimezone()
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment:%M:%S} {meridiem}"


_env = Environment(
    loader=PackageLoader("hello_server", "templates"),
    autoescape=select_autoescape(["html"]),
)
_env.filters["uptime"] = format_uptime
_env.filters["local_timestamp"] = format_local_timestamp


def render_home_page(data: HomePageData) -> str:
    template = _env.get_template("home.html")
    return template.render(
        title=data.title,
        server=data.server_info,
        endpoints=data.endpoints,
    )


def build_home_page_data(uptime_seconds, environment, now=None, endpoints=DEFAULT_ENDPOINTS) -> HomePageData:
    """Snapshot the current server state for the landing page."""
    return HomePageData(
        title="Hello World - Flask Server",
        server_info=ServerInfo(
            uptime=uptime_seconds,
            timestamp=utc_timestamp(now),
            runtime_version=f"Python {platform.python_version()}",
            environment=environment,
        ),
        endpoints=tuple(endpoints),
    )
