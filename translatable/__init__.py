from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import os
import logging
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()

logger = logging.getLogger(__name__)


def _database_url(config_name):
    """Resolve the database URL for the given config."""
    if config_name == 'testing':
        url = os.getenv('TEST_DATABASE_URL', 'sqlite://')
    else:
        url = os.getenv('DATABASE_URL', 'sqlite:///translatable.db')
    # Handle Render's postgres:// vs postgresql:// issue
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def create_app(config_name='development'):
    app = Flask(__name__)

    # Config
    app.config['SQLALCHEMY_DATABASE_URI'] = _database_url(config_name)
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['TESTING'] = config_name == 'testing'
    app.config['DEFAULT_LOCALE'] = os.getenv('DEFAULT_LOCALE', 'en')

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app)

    from translatable.services.request_locale import init_request_locale
    init_request_locale(app)

    # Create tables with error handling
    with app.app_context():
        from translatable import models  # noqa: F401 - register tables
        try:
            db.create_all()
        except Exception as e:
            logger.warning(f"Could not create database tables: {e}")

    from translatable.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app
