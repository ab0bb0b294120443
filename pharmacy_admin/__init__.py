from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config
from .exceptions import StoreError
from .extensions import cors, store


def register_error_handlers(app: Flask):
    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        if e.status_code >= 500:
            app.logger.error("%s %s", e.message, e.context)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        message = "Not found" if e.code == 404 else e.description
        return jsonify({"error": message}), e.code


def create_app(config_class: type[Config] = Config):
    # Static files are served by the pages blueprint
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Records keep their insertion key order in responses
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # Extensions
    cors.init_app(app)
    store.init_app(app)

    register_error_handlers(app)

    # Blueprints
    from .routes.api import bp as api
    from .routes.collections import bp as collections_api
    from .routes.uploads import bp as uploads_api
    from .routes.pages import bp as pages_bp

    app.register_blueprint(api, url_prefix="/api")
    app.register_blueprint(collections_api, url_prefix="/api")
    app.register_blueprint(uploads_api, url_prefix="/api")
    app.register_blueprint(pages_bp)

    return app
