"""
Air Quality Dashboard - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from aqi_dashboard.config import Config
from aqi_dashboard.errors import StoreUnavailable, StoreWriteError
from aqi_dashboard.extensions import db

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    from aqi_dashboard.services.storage import StorageGateway, engine_options

    store = StorageGateway.from_config(app.config)
    app.extensions['aqi_store'] = store

    # Initialize extensions only when there is a store to talk to
    if store.configured:
        options = dict(app.config.get('SQLALCHEMY_ENGINE_OPTIONS') or {})
        for key, value in engine_options(store.database_uri, store.timeout).items():
            options.setdefault(key, value)
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = options
        db.init_app(app)
    else:
        logger.info('No database configured; serving estimated data only')

    # Register blueprints
    from aqi_dashboard.dashboard import dashboard_bp

    app.register_blueprint(dashboard_bp, url_prefix='/api')

    if store.configured:
        with app.app_context():
            _init_store(app, store)

    return app


def _init_store(app, store):
    """Create tables and load reference data. Failures leave the app in mock mode."""
    from aqi_dashboard.services.advisory import static_advisories
    from aqi_dashboard.services.catalog import CITIES

    uri = store.database_uri
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)

    try:
        db.create_all()
    except SQLAlchemyError as e:
        logger.warning('Could not create tables, falling back to mock data: %s', e)
        return

    if not app.config.get('SEED_REFERENCE_DATA', True):
        return
    try:
        added_cities, added_advisories = store.seed_reference_data(CITIES, static_advisories())
    except (StoreUnavailable, StoreWriteError) as e:
        logger.warning('Could not seed reference data: %s', e)
        return
    if added_cities or added_advisories:
        logger.info('Seeded %d cities and %d health advisories', added_cities, added_advisories)
