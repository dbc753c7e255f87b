"""
Reading Simulation Service

Generates synthetic AQI readings around a city's baseline. Used for
historical data when the store has none, and for the simulated live
(CPCB-style) feed.
"""

import random
from datetime import datetime, timedelta

from aqi_dashboard.errors import InvalidInput
from aqi_dashboard.services.aqi import quality_category
from aqi_dashboard.services.baseline import baseline_for

MIN_AQI = 10

# Noise amplitudes: history mock is +/-30, live simulation is +/-20
HISTORY_VARIATION = 60
LIVE_VARIATION = 40

# Pollutant concentration as a fixed fraction of AQI
POLLUTANT_FRACTIONS = (
    ('pm25', 0.6),
    ('pm10', 0.8),
    ('no2', 0.4),
    ('so2', 0.2),
    ('co', 0.1),
    ('o3', 0.3),
    ('nh3', 0.15),
)

POLLUTANTS = tuple(name for name, _ in POLLUTANT_FRACTIONS)


def validate_days(days, maximum=None):
    """Return `days` as an int, raising InvalidInput unless 0 < days <= maximum."""
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidInput(f'days must be an integer, got {days!r}')
    if days <= 0:
        raise InvalidInput(f'days must be positive, got {days}')
    if maximum is not None and days > maximum:
        raise InvalidInput(f'days must be at most {maximum}, got {days}')
    return days


def perturb(base, variation, rng):
    """Centre `base` on a uniform window of width `variation`, floored at MIN_AQI."""
    return max(MIN_AQI, int(round(base + (rng.random() - 0.5) * variation)))


def derive_pollutants(aqi):
    return {name: aqi * fraction for name, fraction in POLLUTANT_FRACTIONS}


def build_reading(city_id, aqi, recorded_at, station_name=None):
    reading = {
        'id': None,
        'city_id': city_id,
        'station_name': station_name,
        'aqi_value': aqi,
    }
    reading.update(derive_pollutants(aqi))
    reading['quality_category'] = quality_category(aqi)
    reading['recorded_at'] = recorded_at.isoformat()
    return reading


def synthesize_readings(city_id, days, rng=None, now=None):
    """
    Synthesize one reading per day for the last `days` days.

    Args:
        city_id: City id, used for the baseline lookup
        days: Number of daily readings (> 0)
        rng: random.Random-compatible source; a fresh one when omitted
        now: Timestamp of the newest reading (default: utcnow)

    Returns:
        List of reading dicts, oldest first, the last one at `now`.
    """
    validate_days(days)
    rng = rng or random.Random()
    now = now or datetime.utcnow()
    base = baseline_for(city_id)

    readings = []
    for offset in range(days - 1, -1, -1):
        aqi = perturb(base, HISTORY_VARIATION, rng)
        readings.append(build_reading(city_id, aqi, now - timedelta(days=offset),
                                      station_name=f'Mock Station {city_id}'))
    return readings


def simulate_live_reading(city, rng=None, now=None):
    """Simulate a current reading for a city dict, as a monitoring station would report it."""
    rng = rng or random.Random()
    now = now or datetime.utcnow()
    base = baseline_for(city['name'], city.get('state'))
    aqi = perturb(base, LIVE_VARIATION, rng)
    return build_reading(city['id'], aqi, now, station_name=f"{city['name']} Central")
