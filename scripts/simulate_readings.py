"""Insert synthesized daily readings for every city (development data).

Usage: python scripts/simulate_readings.py [days]
"""
import random
import sys
sys.path.insert(0, '.')

from aqi_dashboard import create_app
from aqi_dashboard.errors import StoreWriteError
from aqi_dashboard.services import synthesize_readings

days = int(sys.argv[1]) if len(sys.argv) > 1 else 30

app = create_app()
store = app.extensions['aqi_store']

with app.app_context():
    if not store.is_available():
        print('Store not available; nothing written.')
        sys.exit(1)

    rng = random.Random(app.config.get('AQI_RANDOM_SEED'))
    cities = store.list_cities().value or []
    written = failed = 0
    for city in cities:
        for reading in synthesize_readings(city['id'], days, rng=rng):
            try:
                store.insert_reading(reading)
                written += 1
            except StoreWriteError as e:
                failed += 1
                print(f"Could not store reading for {city['name']}: {e}")

    print(f'Simulated {written} readings for {len(cities)} cities ({failed} failed)')
