import logging
import random
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from aqi_dashboard import create_app
from aqi_dashboard.config import TestConfig
from aqi_dashboard.errors import StoreUnavailable, StoreWriteError
from aqi_dashboard.extensions import db
from aqi_dashboard.models import AQIForecast, HealthAdvisory
from aqi_dashboard.results import StoreResult
from aqi_dashboard.services.aqi import classify
from aqi_dashboard.services.forecast import generate_forecast
from aqi_dashboard.services.simulation import synthesize_readings
from aqi_dashboard.services.storage import StorageGateway, engine_options


def _forecast(city_id, forecast_date, aqi):
    return {
        'city_id': city_id,
        'forecast_date': forecast_date,
        'predicted_aqi': aqi,
        'predicted_pm25': aqi * 0.6,
        'confidence_score': 0.9,
        'weather_factor': {'humidity': 70},
        'model_version': 'v1.0',
    }


def test_reference_data_is_seeded(store):
    assert store.is_available()
    cities = store.list_cities()
    assert cities.status == StoreResult.OK
    assert len(cities.value) == 83
    assert store.read_city(1).value['name'] == 'Delhi'
    assert store.read_city(9999).status == StoreResult.EMPTY


def test_advisory_ranges_cover_every_value(store):
    for aqi in range(0, 601):
        result = store.read_advisory(aqi)
        assert result.has_data, aqi
        assert result.value['category'] == classify(aqi).category


def test_fractional_advisory_lookup(store):
    assert store.read_advisory(50.5).value['category'] == 'Satisfactory'
    assert store.read_advisory(5000).value['category'] == 'Severe'


def test_insert_and_read_latest(store):
    assert store.read_latest_reading(2).status == StoreResult.EMPTY

    now = datetime(2026, 10, 18, 9, 30)
    for reading in synthesize_readings(2, 3, rng=random.Random(1), now=now):
        stored = store.insert_reading(reading)
        assert stored['id'] is not None

    latest = store.read_latest_reading(2)
    assert latest.has_data
    assert latest.value['recorded_at'] == now.isoformat()


def test_readings_since_are_oldest_first(store):
    now = datetime(2026, 10, 18, 9, 30)
    for reading in synthesize_readings(2, 5, rng=random.Random(1), now=now):
        store.insert_reading(reading)

    result = store.read_readings_since(2, now - timedelta(days=2))
    stamps = [r['recorded_at'] for r in result.value]
    assert len(stamps) == 3
    assert stamps == sorted(stamps)
    assert store.read_readings_since(3, now - timedelta(days=2)).status == StoreResult.EMPTY


def test_upsert_replaces_existing_forecast(store):
    day = date(2026, 10, 19)
    first = store.upsert_forecast(_forecast(1, day.isoformat(), 150))
    second = store.upsert_forecast(_forecast(1, day, 175))

    assert first['id'] == second['id']
    rows = AQIForecast.query.filter_by(city_id=1, forecast_date=day).all()
    assert len(rows) == 1
    assert rows[0].predicted_aqi == 175


@pytest.fixture()
def file_app(tmp_path):
    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'aqi.db'}"

    app = create_app(FileConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


def test_upsert_overwrites_row_inserted_concurrently(file_app):
    day = date(2026, 10, 19)
    other = create_engine(file_app.config['SQLALCHEMY_DATABASE_URI'])
    inserted = []

    def insert_from_other_connection(conn, cursor, statement, parameters, context, executemany):
        if inserted or not statement.startswith('INSERT INTO aqi_forecasts'):
            return
        with other.begin() as c:
            c.execute(AQIForecast.__table__.insert().values(
                city_id=1, forecast_date=day, predicted_aqi=111, model_version='v1.0'))
        inserted.append(statement)

    with file_app.app_context():
        store = file_app.extensions['aqi_store']
        event.listen(db.engine, 'before_cursor_execute', insert_from_other_connection)
        try:
            stored = store.upsert_forecast(_forecast(1, day, 222))
        finally:
            event.remove(db.engine, 'before_cursor_execute', insert_from_other_connection)
        rows = AQIForecast.query.filter_by(city_id=1, forecast_date=day).all()
    other.dispose()

    assert inserted
    assert stored['predicted_aqi'] == 222
    assert [r.predicted_aqi for r in rows] == [222]


def test_generating_twice_keeps_one_forecast_per_day(store):
    today = date(2026, 10, 18)
    history = synthesize_readings(1, 7, rng=random.Random(1))
    generate_forecast(1, 3, history, store=store, rng=random.Random(1), today=today)
    second = generate_forecast(1, 3, history, store=store, rng=random.Random(2), today=today)

    rows = AQIForecast.query.filter_by(city_id=1).order_by(AQIForecast.forecast_date).all()
    assert len(rows) == 3
    assert [r.predicted_aqi for r in rows] == [f['predicted_aqi'] for f in second]

    cached = store.read_forecasts(1, today + timedelta(days=1), 3)
    assert [f['forecast_date'] for f in cached.value] == [f['forecast_date'] for f in second]


def test_write_failure_raises_store_write_error(store, monkeypatch):
    def broken_commit(self):
        raise OperationalError('COMMIT', {}, Exception('database is locked'))

    monkeypatch.setattr(Session, 'commit', broken_commit)
    reading = synthesize_readings(1, 1)[0]
    with pytest.raises(StoreWriteError):
        store.insert_reading(reading)


def test_missing_table_reads_as_unavailable(store, caplog):
    HealthAdvisory.__table__.drop(db.engine)
    with caplog.at_level(logging.WARNING):
        result = store.read_advisory(75)
    assert result.status == StoreResult.UNAVAILABLE
    assert result.error == 'database unavailable'
    # the driver error goes to the log only
    assert 'health_advisories' in caplog.text


def test_unconfigured_gateway():
    gateway = StorageGateway(None)
    assert not gateway.configured
    assert not gateway.is_available()
    assert gateway.read_latest_reading(1).status == StoreResult.UNAVAILABLE
    assert gateway.read_advisory(75).error == 'store not configured'
    with pytest.raises(StoreUnavailable):
        gateway.upsert_forecast(_forecast(1, '2026-10-19', 100))


def test_disabled_gateway_is_not_configured():
    gateway = StorageGateway.from_config({'SQLALCHEMY_DATABASE_URI': 'sqlite://', 'AQI_STORE_ENABLED': False})
    assert not gateway.configured


def test_engine_options_bound_connection_and_statement_time():
    assert engine_options('sqlite:///x.db', 3) == {'connect_args': {'timeout': 3}}
    assert engine_options('postgresql://u@h/db', 2.5)['connect_args'] == {
        'connect_timeout': 3,
        'options': '-c statement_timeout=2500',
    }
    assert engine_options('mysql+pymysql://u@h/db', 4)['connect_args'] == {
        'connect_timeout': 4, 'read_timeout': 4, 'write_timeout': 4,
    }
    assert engine_options(None, 5) == {}
