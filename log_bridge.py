"""Flask extension that forwards server, request and response logs to a
pluggable logger backend.

The backend is any object with ``connect()``, ``close()`` and one method per
level in ``recording_logger.LEVELS``. Every leveled call is made as
``backend.<level>(tags, data)``.
"""

import logging
import time
import uuid
from datetime import datetime, timezone

from flask import current_app, g, got_request_exception, has_request_context, request

from config import Config
from recording_logger import LEVELS
from validator import OptionsValidator

logger = logging.getLogger(__name__)

EXTENSION_NAME = "log_bridge"

# "log" is the generic level and is never picked from a tag.
TAG_LEVELS = tuple(level for level in LEVELS if level != "log")


def route_tags(*tags):
    """Decorator attaching descriptive tags to a view for response records."""
    def decorator(view):
        view.log_tags = list(tags)
        return view
    return decorator


def resolve_levels(tags, default_level):
    """Map log tags to backend levels.

    Each tag naming a level yields that level once, in tag order. When no
    tag names a level the default level is used.
    """
    if isinstance(tags, str):
        tags = [tags]

    levels = []
    for tag in tags:
        if tag in TAG_LEVELS and tag not in levels:
            levels.append(tag)
    return levels or [default_level]


class LogBridge:
    def __init__(self, app=None, logger=None, config=None, **options):
        base = config if config is not None else Config()
        self.options = base.bridge_options(**options)
        OptionsValidator().check(self.options)

        self._logger = logger
        self._closed = False
        self.app = None

        if app is not None:
            self.init_app(app)

    @property
    def logger(self):
        return self._logger

    def init_app(self, app):
        if self._logger is None:
            raise ValueError("LogBridge requires a 'logger' backend")

        app.extensions[EXTENSION_NAME] = self
        self.app = app

        app.before_request(self._start_request)
        app.after_request(self._log_response)
        got_request_exception.connect(self._log_exception, app)

        backend_errors = getattr(self._logger, "on_error", None)
        if backend_errors is not None:
            backend_errors.connect(self._handle_backend_error, weak=False)

        self._logger.connect()
        logger.debug("LogBridge registered on app %s", app.name)

    def close(self):
        """Close the backend. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._logger.close()

    @property
    def closed(self):
        return self._closed

    # --- Log calls ---

    def server_log(self, tags, data=None):
        """Server-scoped log call."""
        self._dispatch(tags, data)

    def request_log(self, tags, data=None):
        """Request-scoped log call. Only valid while handling a request."""
        if not has_request_context():
            raise RuntimeError("request_log() called outside of a request")
        self._dispatch(tags, data)

    def _dispatch(self, tags, data):
        for level in resolve_levels(tags, self.options["default_level"]):
            self._emit(level, tags, data)

    def _emit(self, level, tags, data):
        try:
            getattr(self._logger, level)(tags, data)
        except Exception:
            logger.exception("Logger backend failed on %s() call", level)

    # --- Request lifecycle hooks ---

    def _start_request(self):
        g.log_bridge_request_id = uuid.uuid4().hex
        g.log_bridge_started = time.perf_counter()

    def _log_response(self, response):
        if request.path in self.options["ignore_paths"]:
            return response

        record = self._base_record()
        if self.options["log_query"]:
            record["query"] = request.args.to_dict(flat=True)
        record["status_code"] = response.status_code
        record["route_tags"] = self._route_tags()
        record["response_time_ms"] = self._elapsed_ms()
        record["remote_address"] = request.remote_addr
        if self.options["log_payload"]:
            record["payload"] = self._payload()

        self._emit(self.options["response_level"], ["response"], record)
        return response

    def _log_exception(self, sender, exception=None, **extra):
        if not self.options["log_errors"]:
            return

        record = self._base_record()
        record["error"] = {
            "type": type(exception).__name__,
            "message": str(exception),
        }
        self._emit(self.options["error_level"], ["error"], record)

    def _handle_backend_error(self, sender, error=None, **extra):
        logger.warning("Logger backend %r reported an error: %s", sender, error)

    # --- Helpers ---

    def _base_record(self):
        return {
            "id": g.get("log_bridge_request_id"),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "method": request.method,
            "path": request.path,
        }

    def _route_tags(self):
        view = current_app.view_functions.get(request.endpoint)
        return list(getattr(view, "log_tags", []))

    def _elapsed_ms(self):
        started = g.get("log_bridge_started")
        if started is None:
            return None
        return round((time.perf_counter() - started) * 1000, 3)

    @staticmethod
    def _payload():
        payload = request.get_json(silent=True)
        if payload is not None:
            return payload
        return request.get_data(as_text=True) or None
