from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .middleware.store_middleware import store_middleware
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint
import logging
import os

OPENAPI_FILENAME = "storebuilder_openapi.yaml"
OPENAPI_URL = "/openapi/storebuilder.yaml"
SWAGGER_URL = "/swagger"


def configure_logging(app: Flask) -> None:
    # Module loggers live under "storebuilder.*" and propagate to app.logger
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)


def register_api_docs(app: Flask) -> None:
    """Public OpenAPI document plus Swagger UI; neither needs a store."""

    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_spec")
    def serve_openapi():
        spec_path = os.path.join(current_app.root_path, "api", "v1", OPENAPI_FILENAME)

        if not os.path.exists(spec_path):
            raise FileNotFoundError(f"{OPENAPI_FILENAME} not found")

        return send_file(spec_path, mimetype="application/yaml", as_attachment=False)

    app.register_blueprint(
        get_swaggerui_blueprint(
            SWAGGER_URL,
            OPENAPI_URL,
            config={
                "app_name": "Store Builder API",
                "deepLinking": True,
                "persistAuthorization": True,
            },
        ),
        url_prefix=SWAGGER_URL,
    )


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    from .models import store, page, section, user, audit_log  # noqa: F401  register tables

    # -------------------------------------------------
    # Store context + API
    # -------------------------------------------------
    store_middleware(app)
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_api_docs(app)

    app.logger.debug("Store builder app created with %s config", config_name)
    return app
