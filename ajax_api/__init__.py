"""Flask helpers for AJAX endpoints and a small demo API using them."""

import os
from flask import Flask
from flask_cors import CORS

from utils.config import load_config, merge_config
from utils.logger import setup_logger

from ajax_api.component import AjaxComponent
from ajax_api.middleware.error_handler import register_error_handlers
from ajax_api.routes import contact_logs


def create_app(config=None):
    """Create and configure the Flask application."""
    if config is None:
        config = load_config(os.environ.get('AJAX_CONFIG', 'config/config.yaml'))
    else:
        config = merge_config(config)

    # Initialize logging
    log_settings = config['logging']
    logger = setup_logger(log_settings['level'], log_settings['file'], log_settings['colors'])

    app = Flask(__name__)

    if config['cors']['enabled']:
        CORS(app)

    # Register error handlers
    register_error_handlers(app)

    ajax = AjaxComponent(config)
    app.extensions['ajax'] = ajax

    # Register route handlers
    contact_logs.register_routes(app, ajax)

    logger.debug(f"Application created, AJAX requests gated on '{config['ajax']['request_type']}'")
    return app
