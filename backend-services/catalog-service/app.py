# backend-services/catalog-service/app.py
# Serves a user's movie catalog assembled from movie-info and ratings-data
from flask import Flask, jsonify
from flask_cors import CORS
import os
import logging
from logging.handlers import RotatingFileHandler

import config
from catalog_logic import build_catalog
from services import downstream_clients
from services.downstream_clients import DownstreamServiceError
from shared.contracts import ApiError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "catalog_service.log"
# Loggers outside app.logger that write to the service's handlers
MODULE_LOGGERS = ["catalog_logic", "services.downstream_clients"]

app = Flask(__name__)
PORT = config.get_port()

CORS(app, resources={r"/*": {"origins": config.get_cors_origins()}})


def _build_handlers(log_level):
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    log_directory = config.get_log_dir()
    os.makedirs(log_directory, exist_ok=True)
    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            os.path.join(log_directory, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=5,
        ),
    ]
    for h in handlers:
        h.setLevel(log_level)
        h.setFormatter(formatter)
    return handlers


def _attach_handlers(logger, handlers, log_level):
    """Replaces a logger's handlers, so repeated setup never duplicates output."""
    logger.setLevel(log_level)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)


def setup_logging(app):
    """Routes app.logger and the service's module loggers to the console and a rotating file."""
    log_level = getattr(logging, config.get_log_level(), logging.INFO)
    handlers = _build_handlers(log_level)

    _attach_handlers(app.logger, handlers, log_level)
    for name in MODULE_LOGGERS:
        _attach_handlers(logging.getLogger(name), handlers, log_level)

    # werkzeug re-adds its own handler on first use; keep it off the root logger
    werk = logging.getLogger("werkzeug")
    werk.propagate = False
    for h in list(werk.handlers):
        if isinstance(h, logging.StreamHandler):
            werk.removeHandler(h)

    app.logger.info("Catalog service logging initialized.")


setup_logging(app)


def _internal_error():
    return jsonify(ApiError(error="An internal server error occurred").model_dump()), 500


@app.route('/catalog/<user_id>', methods=['GET'])
def get_catalog(user_id):
    """
    Returns the catalog for a user as a list of {name, desc, rating}.

    The user id is accepted but does not change which movies are listed.
    """
    app.logger.info(f"Request received for /catalog/{user_id}")
    try:
        catalog = build_catalog(
            config.get_movie_ids(),
            downstream_clients.fetch_movie,
            downstream_clients.fetch_rating,
        )
        return jsonify([item.model_dump(by_alias=True) for item in catalog]), 200

    except DownstreamServiceError as e:
        app.logger.error(f"Catalog for {user_id} failed on {e.service} ({e.url}): {e.reason}")
        return _internal_error()
    except Exception as e:
        app.logger.error(f"An unexpected error occurred in /catalog/{user_id}: {e}", exc_info=True)
        return _internal_error()


@app.route('/health', methods=['GET'])
def health_check():
    """Standard health check endpoint."""
    return jsonify({"status": "healthy"}), 200


@app.errorhandler(404)
def not_found(e):
    return jsonify(ApiError(error="Not found").model_dump()), 404


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=PORT, debug=config.is_debug())
