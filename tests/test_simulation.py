import random
from datetime import datetime, timedelta

import pytest

from aqi_dashboard.errors import InvalidInput
from aqi_dashboard.services.aqi import classify
from aqi_dashboard.services.simulation import (
    MIN_AQI, derive_pollutants, perturb, simulate_live_reading, synthesize_readings,
)


NOW = datetime(2026, 10, 18, 12, 0, 0)


def test_delhi_week_of_readings():
    readings = synthesize_readings(1, 7, rng=random.Random(7), now=NOW)

    assert len(readings) == 7
    dates = [datetime.fromisoformat(r['recorded_at']).date() for r in readings]
    assert dates == [NOW.date() - timedelta(days=i) for i in range(6, -1, -1)]
    for r in readings:
        assert r['city_id'] == 1
        assert r['aqi_value'] >= MIN_AQI
        assert 150 <= r['aqi_value'] <= 210
        assert r['quality_category'] == classify(r['aqi_value']).category


def test_pollutants_are_fixed_fractions_of_aqi():
    for r in synthesize_readings(3, 10, rng=random.Random(1), now=NOW):
        aqi = r['aqi_value']
        assert r['pm25'] == pytest.approx(0.6 * aqi)
        assert r['pm10'] == pytest.approx(0.8 * aqi)
        assert r['no2'] == pytest.approx(0.4 * aqi)
        assert r['so2'] == pytest.approx(0.2 * aqi)
        assert r['co'] == pytest.approx(0.1 * aqi)
        assert r['o3'] == pytest.approx(0.3 * aqi)
        assert r['nh3'] == pytest.approx(0.15 * aqi)


def test_midpoint_random_value_returns_baseline(fixed_rng):
    readings = synthesize_readings(1, 3, rng=fixed_rng(0.5), now=NOW)
    assert [r['aqi_value'] for r in readings] == [180, 180, 180]
    assert {r['quality_category'] for r in readings} == {'Moderate'}


def test_noise_amplitude_is_thirty_points(fixed_rng):
    assert synthesize_readings(1, 1, rng=fixed_rng(0.0), now=NOW)[0]['aqi_value'] == 150
    assert synthesize_readings(1, 1, rng=fixed_rng(0.99), now=NOW)[0]['aqi_value'] == 209


def test_perturb_floors_at_minimum(fixed_rng):
    assert perturb(20, 60, fixed_rng(0.0)) == MIN_AQI
    assert perturb(0, 60, fixed_rng(0.5)) == MIN_AQI


def test_same_seed_same_readings():
    first = synthesize_readings(5, 5, rng=random.Random(99), now=NOW)
    second = synthesize_readings(5, 5, rng=random.Random(99), now=NOW)
    assert first == second


def test_unknown_city_centres_on_default(fixed_rng):
    reading = synthesize_readings(4242, 1, rng=fixed_rng(0.5), now=NOW)[0]
    assert reading['aqi_value'] == 120


@pytest.mark.parametrize('days', [0, -3, 2.5, None, True])
def test_invalid_day_counts_are_rejected(days):
    with pytest.raises(InvalidInput):
        synthesize_readings(1, days)


def test_derive_pollutants():
    assert derive_pollutants(100) == pytest.approx({
        'pm25': 60, 'pm10': 80, 'no2': 40, 'so2': 20, 'co': 10, 'o3': 30, 'nh3': 15,
    })


def test_live_reading_uses_name_and_state(fixed_rng):
    delhi = {'id': 1, 'name': 'Delhi', 'state': 'Delhi'}
    reading = simulate_live_reading(delhi, rng=fixed_rng(0.75), now=NOW)
    # live noise is +/-20: 180 + 0.25 * 40
    assert reading['aqi_value'] == 190
    assert reading['station_name'] == 'Delhi Central'
    assert reading['recorded_at'] == NOW.isoformat()

    village = {'id': 500, 'name': 'Nowhere Khurd', 'state': 'Punjab'}
    assert simulate_live_reading(village, rng=fixed_rng(0.5), now=NOW)['aqi_value'] == 160
