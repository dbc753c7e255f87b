import pytest

from aqi_dashboard import create_app
from aqi_dashboard.config import MockConfig, TestConfig
from aqi_dashboard.extensions import db


class FixedRandom:
    """Stand-in for random.Random whose random() always returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture()
def fixed_rng():
    return FixedRandom


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def store(app, app_context):
    return app.extensions['aqi_store']


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def mock_app():
    return create_app(MockConfig)


@pytest.fixture()
def mock_client(mock_app):
    return mock_app.test_client()
