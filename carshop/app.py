# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from carshop.infrastructure.container import Container
from carshop.shared.config import AppConfig, load_config
from carshop.shared.logging import logger, setup_logging
from carshop.shared.middleware.error_handler import configure_error_handling
from carshop.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    container.database.init_db()

    app = Flask(__name__, static_folder=None)
    app.extensions["carshop.container"] = container
    configure_error_handling(app, config)
    configure_request_logging(app, config)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.allowed_origins}},
        supports_credentials="*" not in config.allowed_origins,
    )
    app.register_blueprint(container.car_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.user_controller.as_blueprint())
    app.register_blueprint(container.misc_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(f"Flask app initialized (env={config.app_env}, db={config.database_url})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server listening on port http://127.0.0.1:{config.port}/")
    app.run(host="0.0.0.0", port=config.port, debug=not config.is_production())


if __name__ == "__main__":
    main()
