"""
Configuration settings for the Air Quality Dashboard
"""
import os


def _env_flag(name, default='1'):
    return os.environ.get(name, default).strip().lower() not in ('0', 'false', 'no', '')


def _env_int(name):
    value = os.environ.get(name)
    return int(value) if value not in (None, '') else None


class Config:
    """Flask application configuration"""

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', None)
    if SQLALCHEMY_DATABASE_URI is None:
        SQLALCHEMY_DATABASE_URI = 'sqlite:///' + os.path.join(basedir, 'instance', 'aqi_dashboard.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Set AQI_STORE_ENABLED=0 (or DATABASE_URL='') to serve estimated data only
    AQI_STORE_ENABLED = _env_flag('AQI_STORE_ENABLED')

    # Seconds to wait for a connection before the store counts as unavailable
    STORE_TIMEOUT_SECONDS = float(os.environ.get('STORE_TIMEOUT_SECONDS') or 5)

    # Load cities and health advisories into an empty store at start-up
    SEED_REFERENCE_DATA = _env_flag('SEED_REFERENCE_DATA')

    # Fixed seed makes simulated readings and forecasts reproducible
    AQI_RANDOM_SEED = _env_int('AQI_RANDOM_SEED')

    # Request windows (days)
    HISTORY_DEFAULT_DAYS = 30
    FORECAST_DEFAULT_DAYS = 3
    FORECAST_HISTORY_DAYS = 7
    MAX_DAYS = 365

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AQI_STORE_ENABLED = True
    SEED_REFERENCE_DATA = True
    AQI_RANDOM_SEED = 42


class MockConfig(Config):
    """No backing store: every response is estimated."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = None
    AQI_STORE_ENABLED = False
    AQI_RANDOM_SEED = 42
