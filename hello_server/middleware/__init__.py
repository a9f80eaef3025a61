from .request_logging import RequestLogger, classify_route, log_route_marker, random_request_id
