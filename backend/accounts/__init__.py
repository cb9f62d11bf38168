"""Flask application factory and initialization."""
import logging

from flask import Flask, jsonify
from backend.accounts.config import Config
from backend.accounts.extensions import init_extensions
from backend.accounts import db


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.getLogger('backend.accounts').setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    init_extensions(app)

    with app.app_context():
        if not db.ensure_indexes():
            app.logger.warning('Could not ensure DB indexes at startup')

    @app.route('/api/health')
    def health_check():
        """Health check endpoint with database connectivity."""
        response = {
            "status": "ok",
            "service": "accounts-signup-api"
        }
        db_health = db.health_check()
        response["database"] = db_health
        if db_health.get("status") != "healthy":
            response["status"] = "degraded"
        return jsonify(response)

    register_controllers(app)
    register_blueprints(app)

    return app


def register_controllers(app):
    """Build controllers once and keep them on `app.extensions`."""
    from backend.accounts.main.factories.signup import make_signup_controller

    app.extensions['signup_controller'] = make_signup_controller(app.config)


def register_blueprints(app):
    """Register Flask blueprints with the application.

    Args:
        app: Flask application instance
    """
    from backend.accounts.blueprints.api.signup.routes import signup_bp

    app.register_blueprint(signup_bp, url_prefix='/api')
