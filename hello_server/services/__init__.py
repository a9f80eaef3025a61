from .uptime import ProcessUptime, format_uptime, utc_timestamp
from .home_page import (
    Endpoint,
    ServerInfo,
    HomePageData,
    build_home_page_data,
    format_local_timestamp,
    render_home_page
)
