#!/usr/bin/env python3
"""
Storefront catalog read API
===========================

Single-command run:  python -m storefront.main

See utils/config.py for all environment-variable tunables.
"""

from typing import Optional

from flask import Flask
from sqlalchemy.orm import sessionmaker

from storefront.api import api_bp
from storefront.services.database import open_store
from storefront.services.logging_utils import configure_logging, get_service_logger
from storefront.utils.config import Config, get_config
from storefront.utils.constants import SERVICE_NAME


logger = get_service_logger("api")


def create_app(
    session_factory: Optional[sessionmaker] = None, config: Optional[Config] = None
) -> Flask:
    """
    Flask application factory.

    Args:
        session_factory: Sessions on the catalog store (default: open the
            store at config.database_url)
        config: Runtime configuration (default: read from the environment)

    Returns:
        Configured Flask application
    """
    config = config or get_config()
    if session_factory is None:
        session_factory = open_store(config.database_url)

    app = Flask(__name__)
    app.config["SESSION_FACTORY"] = session_factory
    app.config["STOREFRONT_CONFIG"] = config

    app.register_blueprint(api_bp)
    return app


def main():
    config = get_config()
    configure_logging(config.log_level)

    app = create_app(config=config)
    logger.info(f"{config.app_name} {config.app_version} ({config.environment})")
    logger.info(f"{SERVICE_NAME} serving on http://{config.host}:{config.port}")

    app.run(host=config.host, port=config.port, debug=config.environment == "development")


if __name__ == "__main__":
    main()
