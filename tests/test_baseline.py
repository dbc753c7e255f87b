import pytest

from aqi_dashboard.services.baseline import (
    CITY_ID_BASELINES, CITY_NAME_BASELINES, DEFAULT_BASELINE, STATE_BASELINES, baseline_for,
)
from aqi_dashboard.services.catalog import CITIES


def test_known_city_by_id_and_name():
    assert baseline_for(1) == 180
    assert baseline_for('Delhi') == 180
    assert baseline_for(37) == 175
    assert baseline_for('Kullu') == 65


def test_unknown_city_and_region_uses_global_default():
    assert baseline_for('Nowhereville', 'Atlantis') == 120
    assert baseline_for('Nowhereville') == DEFAULT_BASELINE
    assert baseline_for(9999) == DEFAULT_BASELINE


def test_unknown_city_falls_back_to_state():
    assert baseline_for('Smalltown', 'Punjab') == 160
    assert baseline_for(9999, 'Kerala') == 90


def test_city_entry_wins_over_state():
    assert baseline_for('Shimla', 'Punjab') == 75


def test_id_table_matches_name_table_for_every_catalogue_city():
    assert len(CITY_ID_BASELINES) == len(CITIES) == 83
    for city in CITIES:
        assert baseline_for(city['id']) == baseline_for(city['name'])


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CITY_NAME_BASELINES['Delhi'] = 10
    with pytest.raises(TypeError):
        STATE_BASELINES['Atlantis'] = 10
