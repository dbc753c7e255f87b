"""
AQI Forecast Service

Short-term forecasts: trend extrapolation from the most recent readings plus
a seasonal term, or a baseline-centred mock when there is no history.
"""

import logging
import math
import random
from datetime import datetime, timedelta

from aqi_dashboard.errors import StoreUnavailable, StoreWriteError
from aqi_dashboard.services.baseline import baseline_for
from aqi_dashboard.services.simulation import HISTORY_VARIATION, MIN_AQI, perturb, validate_days

logger = logging.getLogger(__name__)

TREND_MODEL_VERSION = 'v1.0'
MOCK_MODEL_VERSION = 'mock'

TREND_WINDOW = 3
RANDOM_VARIATION = 30
SEASONAL_AMPLITUDE = 20
MOCK_CONFIDENCE = 0.7
MIN_CONFIDENCE = 0.6
CONFIDENCE_DECAY = 0.1
PM25_FRACTION = 0.6


def seasonal_factor(target_date):
    """Seasonal swing in AQI points for the target date's calendar month (1-12)."""
    return math.sin(target_date.month * math.pi / 6) * SEASONAL_AMPLITUDE


def confidence_for(lead_day):
    return max(MIN_CONFIDENCE, round(1 - lead_day * CONFIDENCE_DECAY, 10))


def recent_trend(readings):
    """Return (mean AQI, per-day trend) over the last TREND_WINDOW readings."""
    values = [r['aqi_value'] for r in readings[-TREND_WINDOW:]]
    avg = sum(values) / len(values)
    trend = (values[-1] - values[0]) / len(values) if len(values) > 1 else 0
    return avg, trend


def _forecast_record(city_id, target_date, predicted_aqi, confidence, weather, model_version):
    return {
        'id': None,
        'city_id': city_id,
        'forecast_date': target_date.isoformat(),
        'predicted_aqi': predicted_aqi,
        'predicted_pm25': predicted_aqi * PM25_FRACTION,
        'confidence_score': confidence,
        'weather_factor': weather,
        'model_version': model_version,
    }


def generate_mock_forecast(city_id, days, rng=None, today=None):
    """Baseline-centred forecast used when no history exists. Never persisted."""
    validate_days(days)
    rng = rng or random.Random()
    today = today or datetime.utcnow().date()
    base = baseline_for(city_id)

    forecasts = []
    for lead_day in range(1, days + 1):
        target = today + timedelta(days=lead_day)
        aqi = perturb(base, HISTORY_VARIATION, rng)
        weather = {'humidity': 60 + rng.random() * 20}
        forecasts.append(_forecast_record(city_id, target, aqi, MOCK_CONFIDENCE, weather, MOCK_MODEL_VERSION))
    return forecasts


def generate_forecast(city_id, days, recent_readings, store=None, rng=None, today=None):
    """
    Generate a forecast for the next `days` days, nearest day first.

    Args:
        city_id: City id
        days: Forecast horizon (> 0)
        recent_readings: Reading dicts ordered oldest first; empty -> mock forecast
        store: optional StorageGateway; when available each day is upserted
        rng: random.Random-compatible source
        today: Generation date (default: current UTC date)

    Returns:
        List of forecast dicts. Days whose upsert fails are left out.
    """
    validate_days(days)
    rng = rng or random.Random()
    today = today or datetime.utcnow().date()

    if not recent_readings:
        logger.info('No history for city %s, using mock forecast', city_id)
        return generate_mock_forecast(city_id, days, rng=rng, today=today)

    avg_aqi, trend = recent_trend(recent_readings)
    persist = store is not None and store.is_available()

    forecasts = []
    for lead_day in range(1, days + 1):
        target = today + timedelta(days=lead_day)
        random_factor = (rng.random() - 0.5) * RANDOM_VARIATION
        predicted = max(MIN_AQI, int(round(avg_aqi + trend * lead_day + seasonal_factor(target) + random_factor)))
        weather = {
            'temperature': 25 + rng.random() * 10,
            'humidity': 60 + rng.random() * 30,
            'wind_speed': 5 + rng.random() * 10,
        }
        record = _forecast_record(city_id, target, predicted, confidence_for(lead_day), weather,
                                  TREND_MODEL_VERSION)

        if persist:
            try:
                record = store.upsert_forecast(record)
            except (StoreWriteError, StoreUnavailable) as e:
                logger.warning('Dropping forecast for city %s on %s: %s', city_id, record['forecast_date'], e)
                continue

        forecasts.append(record)

    return forecasts
