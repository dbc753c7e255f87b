import logging
import random
from datetime import date, datetime, timedelta

import pytest

from aqi_dashboard.dashboard import services
from aqi_dashboard.errors import InvalidInput, NotFound, StoreWriteError
from aqi_dashboard.extensions import db
from aqi_dashboard.models import HealthAdvisory
from aqi_dashboard.results import StoreResult


def test_transient_read_error_falls_back(store, monkeypatch):
    monkeypatch.setattr(store, 'read_readings_since',
                        lambda city_id, since: StoreResult.unavailable('connection reset'))

    result = services.get_historical_readings(store, 1, 5, rng=random.Random(1))
    assert result.is_fallback
    assert 'connection reset' in result.message
    assert len(result.data) == 5


def test_city_lookup_uses_catalogue_when_store_is_down(store, monkeypatch):
    monkeypatch.setattr(store, 'read_city', lambda city_id: StoreResult.unavailable('timeout'))
    assert services.get_city(store, 52)['name'] == 'Dhanbad'
    with pytest.raises(NotFound):
        services.get_city(store, 84)


def test_advisory_gap_is_logged_and_filled(store, caplog):
    HealthAdvisory.query.delete()
    db.session.commit()

    with caplog.at_level(logging.WARNING):
        result = services.get_health_advisory(store, 120)

    assert result.is_fallback
    assert result.data['category'] == 'Moderate'
    assert result.data['general_advice']
    assert 'advisory table has a gap' in caplog.text


def test_stored_advisory_text_is_used(store):
    advisory = HealthAdvisory.query.filter_by(category='Good').first()
    advisory.general_advice = 'Go outside.'
    db.session.commit()

    result = services.get_health_advisory(store, 20)
    assert not result.is_fallback
    assert result.data['general_advice'] == 'Go outside.'
    assert result.data['risk_level'] == 'Low'


def test_partial_forecast_write_is_reported(store, monkeypatch):
    now_readings = services.refresh_current_reading(store, 3, rng=random.Random(1))
    assert not now_readings.is_fallback

    real_upsert = store.upsert_forecast
    calls = []

    def flaky_upsert(forecast):
        calls.append(forecast['forecast_date'])
        if len(calls) == 2:
            raise StoreWriteError('constraint violation')
        return real_upsert(forecast)

    monkeypatch.setattr(store, 'upsert_forecast', flaky_upsert)
    result = services.get_forecast(store, 3, 4, force_refresh=True, rng=random.Random(1))

    assert len(calls) == 4
    assert len(result.data) == 3
    assert result.source == 'database'
    assert result.message == '1 of 4 forecast days could not be stored'


def test_invalid_requests():
    with pytest.raises(InvalidInput):
        services.get_health_advisory(None, float('nan'))


def test_forecast_dates_follow_the_utc_day(mock_app):
    with mock_app.app_context():
        store = mock_app.extensions['aqi_store']
        before = datetime.utcnow().date()
        forecast = services.get_forecast(store, 1, 2, rng=random.Random(1))
        history = services.get_historical_readings(store, 1, 1, rng=random.Random(1))
        after = datetime.utcnow().date()

    first_day = date.fromisoformat(forecast.data[0]['forecast_date'])
    assert first_day in {before + timedelta(days=1), after + timedelta(days=1)}
    latest_day = datetime.fromisoformat(history.data[-1]['recorded_at']).date()
    assert latest_day in {before, after}


def test_failed_refresh_hides_driver_error(store, monkeypatch):
    def failing_insert(reading):
        raise StoreWriteError('insert reading for city 1: (sqlite3.OperationalError) [SQL: INSERT INTO aqi_readings]')

    monkeypatch.setattr(store, 'insert_reading', failing_insert)
    result = services.refresh_current_reading(store, 1, rng=random.Random(1))
    assert result.is_fallback
    assert result.message == 'Using mock data: reading not stored'
