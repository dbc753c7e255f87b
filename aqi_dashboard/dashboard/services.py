"""
Dashboard Services

Decides, per request, whether data comes from the store or is estimated, and
returns it as a DataResult so the UI can flag estimated data.
"""

import logging
import math
from datetime import datetime, timedelta

from aqi_dashboard.errors import InvalidInput, NotFound, StoreUnavailable, StoreWriteError
from aqi_dashboard.results import DataResult
from aqi_dashboard.services.advisory import build_advisory
from aqi_dashboard.services.catalog import CITIES, CITIES_BY_ID, filter_cities
from aqi_dashboard.services.forecast import generate_forecast
from aqi_dashboard.services.simulation import (
    POLLUTANTS, simulate_live_reading, synthesize_readings, validate_days,
)

logger = logging.getLogger(__name__)

MOCK_MESSAGE = 'Using mock data: {}'

CURRENT_FIELDS = ('aqi_value', 'pm25', 'pm10', 'no2', 'quality_category', 'recorded_at')
HISTORY_SELECTORS = ('aqi',) + POLLUTANTS


def _degraded(what, result):
    """Log why `what` is being estimated and return the user-facing message."""
    reason = result.error or 'no rows in store'
    if result.error == 'store not configured':
        logger.info('%s: store not configured, using mock data', what)
    else:
        logger.warning('%s: %s, using mock data', what, reason)
    return MOCK_MESSAGE.format(reason)


def store_status(store):
    available = store.is_available()
    return {
        'configured': store.configured,
        'available': available,
        'message': None if available else 'Database not available; showing estimated data',
    }


def list_cities(store, state=None, city_type=None, search=None):
    """List cities, optionally filtered by state, display type and search text."""
    result = store.list_cities()
    if result.has_data:
        return DataResult.from_store(filter_cities(result.value, state=state, type_name=city_type, search=search))

    message = _degraded('City list', result)
    cities = [dict(c) for c in CITIES]
    return DataResult.fallback(filter_cities(cities, state=state, type_name=city_type, search=search), message)


def get_city(store, city_id):
    """Return one city dict. Raises NotFound for ids neither the store nor the catalogue knows."""
    result = store.read_city(city_id)
    if result.has_data:
        return result.value
    # a populated city table is authoritative
    if result.status == result.EMPTY and store.list_cities().has_data:
        raise NotFound(f'City {city_id} not found')
    city = CITIES_BY_ID.get(city_id)
    if city is None:
        raise NotFound(f'City {city_id} not found')
    return dict(city)


def current_view(reading):
    return {field: reading.get(field) for field in CURRENT_FIELDS}


def get_current_reading(store, city_id, rng=None, now=None):
    """Latest reading for a city, or a simulated live reading."""
    city = get_city(store, city_id)
    result = store.read_latest_reading(city_id)
    if result.has_data:
        return DataResult.from_store(current_view(result.value))

    message = _degraded(f'Current AQI for city {city_id}', result)
    return DataResult.fallback(current_view(simulate_live_reading(city, rng=rng, now=now)), message)


def refresh_current_reading(store, city_id, rng=None, now=None):
    """Simulate a fresh station reading and store it."""
    city = get_city(store, city_id)
    reading = simulate_live_reading(city, rng=rng, now=now)
    try:
        reading = store.insert_reading(reading)
    except (StoreUnavailable, StoreWriteError) as e:
        logger.warning('Could not store refreshed reading for city %s: %s', city_id, e)
        reason = str(e) if isinstance(e, StoreUnavailable) else 'reading not stored'
        return DataResult.fallback(current_view(reading), MOCK_MESSAGE.format(reason))
    return DataResult.from_store(current_view(reading))


def get_historical_readings(store, city_id, days, pollutant=None, rng=None, now=None):
    """Readings for the last `days` days, oldest first.

    With a pollutant selector each record also carries a `value` key holding
    that pollutant (or the AQI for 'aqi').
    """
    validate_days(days)
    if pollutant is not None and pollutant not in HISTORY_SELECTORS:
        raise InvalidInput(f'Unknown pollutant {pollutant!r}')
    get_city(store, city_id)

    now = now or datetime.utcnow()
    result = store.read_readings_since(city_id, now - timedelta(days=days))
    if result.has_data:
        history = DataResult.from_store(result.value)
    else:
        message = _degraded(f'History for city {city_id}', result)
        history = DataResult.fallback(synthesize_readings(city_id, days, rng=rng, now=now), message)

    if pollutant is not None:
        key = 'aqi_value' if pollutant == 'aqi' else pollutant
        for r in history.data:
            r['value'] = r.get(key)
    return history


def get_forecast(store, city_id, days, force_refresh=False, history_days=7, rng=None, today=None):
    """Forecast for the next `days` days.

    Stored forecasts are returned when they cover every requested day and no
    refresh is forced; otherwise the forecast is regenerated from recent
    history and upserted. Forecasts built from estimated history are never
    stored, so they cannot come back later as database data.
    """
    validate_days(days)
    get_city(store, city_id)
    now = datetime.utcnow()
    today = today or now.date()

    if not force_refresh:
        cached = store.read_forecasts(city_id, today + timedelta(days=1), days)
        if cached.has_data and len(cached.value) == days:
            return DataResult.from_store(cached.value)

    history = get_historical_readings(store, city_id, history_days, rng=rng, now=now)
    if history.is_fallback:
        forecasts = generate_forecast(city_id, days, history.data, rng=rng, today=today)
        return DataResult.fallback(forecasts, history.message)

    forecasts = generate_forecast(city_id, days, history.data, store=store, rng=rng, today=today)
    if not store.is_available():
        return DataResult.fallback(forecasts, MOCK_MESSAGE.format('forecast not stored'))
    if len(forecasts) < days:
        message = f'{days - len(forecasts)} of {days} forecast days could not be stored'
        return DataResult(forecasts, DataResult.DATABASE, message)
    return DataResult.from_store(forecasts)


def get_health_advisory(store, aqi):
    """Advisory payload for an AQI value."""
    if not math.isfinite(aqi) or aqi < 0:
        raise InvalidInput(f'AQI must be a non-negative number, got {aqi}')

    result = store.read_advisory(aqi)
    if result.has_data:
        return DataResult.from_store(build_advisory(aqi, result.value))

    if result.status == result.EMPTY:
        logger.warning('No advisory range covers AQI %s; advisory table has a gap', aqi)
    message = _degraded(f'Advisory for AQI {aqi}', result)
    return DataResult.fallback(build_advisory(aqi), message)
