from flask import Blueprint, current_app
from hello_server.middleware import log_route_marker
from hello_server.services import build_home_page_data, render_home_page

main_bp = Blueprint("main",__name__)

@main_bp.route("/", methods=["GET"])
@log_route_marker("Home Page")
def index():
  """Serve the landing page with live server status.
  ---
  tags:
    - pages
  produces:
    - text/html
  responses:
    200:
      description: HTML landing page
  """
  data = build_home_page_data(
    uptime_seconds=current_app.extensions["uptime"].seconds(),
    environment=current_app.config["APP_ENV"],
  )
  return render_home_page(data), 200, {"Content-Type": "text/html; charset=utf-8"}
