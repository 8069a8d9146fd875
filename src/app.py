from flask import Flask, Response
from werkzeug.exceptions import MethodNotAllowed
import logging
import os
import sys

from config import ConfigError, load_config, validate_config, get_listen_port
from observability.request_context import start_request, end_request
from observability.metrics import inc
from routes.upload import upload_bp, CONFIG_KEY
from routes.system import system_bp

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None):
    level = level or os.environ.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(config):
    """
    Build the Flask app around an already validated Config.
    Handlers read the config from app.config, never from the environment.
    """
    app = Flask(__name__)
    app.config[CONFIG_KEY] = config

    app.register_blueprint(upload_bp, url_prefix="/api")
    app.register_blueprint(system_bp, url_prefix="/api")

    @app.errorhandler(MethodNotAllowed)
    def _method_not_allowed(e):
        inc("method_not_allowed")
        headers = {}
        if e.valid_methods:
            headers["Allow"] = ", ".join(e.valid_methods)
        return Response("Method not allowed", status=405, mimetype="text/plain", headers=headers)

    @app.before_request
    def _before():
        start_request()

    @app.after_request
    def _after(response):
        return end_request(response)

    return app


def main():
    configure_logging()
    logger.info("Starting server...")

    config = load_config()
    try:
        validate_config(config)
        port = get_listen_port()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    app = create_app(config)
    app.run(host="0.0.0.0", port=port, threaded=True)


if __name__ == "__main__":
    main()
