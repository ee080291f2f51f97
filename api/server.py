import logging

from flask import Flask
from flask_cors import CORS

from core import config
from routes.scripture_api import scripture_bp
from routes.status_api import status_bp
from services.scripture import BibleService, ReaderState, create_provider

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def create_app(service: BibleService = None, state: ReaderState = None) -> Flask:
    """
    Build the Flask app.

    The provider, service and reader state are constructed here (or
    passed in by tests) and stored on app.extensions for the routes.
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY

    if service is None:
        service = BibleService(create_provider())
    if state is None:
        state = ReaderState(translations=[config.DEFAULT_TRANSLATION])

    app.extensions["bible_service"] = service
    app.extensions["reader_state"] = state

    CORS(app)

    # Register blueprints
    app.register_blueprint(status_bp)
    app.register_blueprint(scripture_bp)

    logger.info(f"Scripture reader ready (provider: {service.provider_name})")
    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=5055)
