"""Create the tables and load the city catalogue and health advisories."""
import sys
sys.path.insert(0, '.')

from aqi_dashboard import create_app
from aqi_dashboard.models import City, HealthAdvisory

app = create_app()
store = app.extensions['aqi_store']

if not store.configured:
    print('No database configured (set DATABASE_URL); nothing to do.')
    sys.exit(1)

with app.app_context():
    print('cities:', City.query.count())
    print('health advisories:', HealthAdvisory.query.count())
