from flask import Flask
from flask_cors import CORS
from flasgger import Swagger

from hello_server.config import load_config
from hello_server.middleware import RequestLogger
from hello_server.services import ProcessUptime

def create_app(config=None, uptime=None, id_generator=None, clock=None):
  """Build the Flask app.

  Args:
    config (dict, optional): Overrides applied on top of the environment config.
    uptime (ProcessUptime, optional): Uptime source; starts now if omitted.
    id_generator (callable, optional): Produces request ids for the log.
    clock (callable, optional): Monotonic clock used to time requests.
  """
  app = Flask(__name__)

  app.config.update(load_config())
  if config:
    app.config.update(config)

  app.extensions["uptime"] = uptime or ProcessUptime()

  # Order matters: CORS, then body parsing (built into Flask's request), then logging
  CORS(app)
  RequestLogger(app, id_generator=id_generator, clock=clock)

  from hello_server.routes.main import main_bp
  app.register_blueprint(main_bp)
  from hello_server.routes.health import health_bp
  app.register_blueprint(health_bp)
  from hello_server.routes.errors import errors_bp
  app.register_blueprint(errors_bp)

  Swagger(app)

  return app
