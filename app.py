import logging
import os
import sys

from flask import Flask, request

from config import Config
from log_bridge import LogBridge, route_tags
from recording_logger import RecordingLogger


def create_server(options=None, config=None):
    """Build a Flask app with LogBridge registered and the logging routes.

    ``options["logger"]`` defaults to a fresh RecordingLogger when the key
    is absent. All other options are handed to LogBridge unchanged; "app"
    and "config" are reserved and raise ValueError.
    """
    options = dict(options or {})
    reserved = sorted({"app", "config"} & options.keys())
    if reserved:
        raise ValueError(f"Reserved keys not allowed in options: {', '.join(reserved)}")
    if "logger" not in options:
        options["logger"] = RecordingLogger()

    app = Flask(__name__)
    bridge = LogBridge(app, config=config, **options)

    # Store components on app for access in tests
    app.config["components"] = {
        "logger": options["logger"],
        "log_bridge": bridge,
    }

    # --- Routes ---

    @app.route("/simple")
    def simple():
        return "success"

    @app.route("/route/with/tags")
    @route_tags("foo", "bar", "baz")
    def route_with_tags():
        return "success"

    @app.route("/handler/that/server/logs/info")
    def server_logs_info():
        bridge.server_log(["info", "foo"], "server.log() from handler")
        return "success"

    @app.route("/handler/that/server/logs/error")
    def server_logs_error():
        bridge.server_log(["info", "error", "debug"], "server.log() from handler")
        return "success"

    @app.route("/handler/that/server/logs/default/level")
    def server_logs_default_level():
        bridge.server_log(["foo"], "server.log() from handler")
        return "success"

    @app.route("/handler/that/request/logs/info")
    def request_logs_info():
        bridge.request_log(["info", "foo"], "request.log() from handler")
        return "success"

    @app.route("/handler/that/request/logs/default/level")
    def request_logs_default_level():
        bridge.request_log(["foo"], "request.log() from handler")
        return "success"

    @app.route("/handler/that/request/throws")
    def request_throws():
        raise RuntimeError("oh no!")

    @app.route("/handler/with/payload", methods=["POST"])
    def with_payload():
        payload = request.get_json(silent=True)
        if isinstance(payload, (dict, list)):
            return payload
        return request.get_data()

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    config = Config(os.environ.get("CONFIG_PATH", "config.yaml"))
    app = create_server(config=config)
    try:
        app.run(
            host=config["server"]["host"],
            port=config["server"]["port"],
            debug=config["server"]["debug"],
        )
    finally:
        app.config["components"]["log_bridge"].close()
