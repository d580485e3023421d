"""
Main Flask application for the fact-check service.
Uses Flask app factory pattern with blueprints for modular organization.
"""

from flask import Flask
import logging
import sys

# Import blueprints
from web.routes.api import api_bp

# Import utilities
from web.utils.decorators import register_error_handlers


def create_app(config_name=None):
    """Application factory pattern for Flask app creation."""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object('config')
    if config_name == 'testing':
        app.config['TESTING'] = True

    # Keep non-ASCII characters (°C, accents) readable in responses
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Register error handlers
    register_error_handlers(app)

    # Register blueprints
    app.register_blueprint(api_bp)

    # Set up logging
    _setup_logging(app)

    return app


def _setup_logging(app):
    """Configure logging for the Flask application."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )

    app.logger.setLevel(level)
    logging.getLogger('werkzeug').setLevel(level)


if __name__ == '__main__':
    import config
    app = create_app()
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
