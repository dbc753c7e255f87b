"""
Storage Gateway

Reads and writes readings, forecasts, advisories and cities through
Flask-SQLAlchemy. Reads never raise: an unconfigured store, a missing table
or a connection error all come back as StoreResult.unavailable, and zero rows
as StoreResult.empty. Writes raise StoreUnavailable / StoreWriteError.

All methods must run inside an application context.
"""

import logging
import math
from datetime import date, datetime, timedelta

from sqlalchemy import or_, text
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from aqi_dashboard.errors import StoreUnavailable, StoreWriteError
from aqi_dashboard.extensions import db
from aqi_dashboard.models import AQIForecast, AQIReading, City, HealthAdvisory
from aqi_dashboard.results import StoreResult

logger = logging.getLogger(__name__)

UNAVAILABLE_REASON = 'database unavailable'

READING_FIELDS = ('station_name', 'aqi_value', 'pm25', 'pm10', 'no2', 'so2', 'co', 'o3', 'nh3', 'quality_category')
FORECAST_FIELDS = ('predicted_aqi', 'predicted_pm25', 'confidence_score', 'weather_factor', 'model_version')


def _as_date(value):
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _as_datetime(value):
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def engine_options(database_uri, timeout):
    """SQLAlchemy engine options that bound how long a connection attempt or a statement may block."""
    if not database_uri:
        return {}
    if database_uri.startswith('sqlite'):
        return {'connect_args': {'timeout': timeout}}
    seconds = int(math.ceil(timeout))
    if database_uri.startswith('postgresql'):
        return {
            'connect_args': {
                'connect_timeout': seconds,
                'options': f'-c statement_timeout={int(timeout * 1000)}',
            },
            'pool_pre_ping': True,
        }
    if database_uri.startswith('mysql'):
        return {
            'connect_args': {'connect_timeout': seconds, 'read_timeout': seconds, 'write_timeout': seconds},
            'pool_pre_ping': True,
        }
    return {'pool_pre_ping': True}


def _keyed_upsert(values, update_fields):
    """INSERT ... ON CONFLICT UPDATE for AQIForecast, or None when the dialect has no such statement."""
    dialect = db.engine.dialect.name
    if dialect in ('sqlite', 'postgresql'):
        insert = sqlite_insert if dialect == 'sqlite' else postgresql_insert
        stmt = insert(AQIForecast).values(**values)
        return stmt.on_conflict_do_update(
            index_elements=['city_id', 'forecast_date'],
            set_={field: stmt.excluded[field] for field in update_fields},
        )
    if dialect in ('mysql', 'mariadb'):
        stmt = mysql_insert(AQIForecast).values(**values)
        return stmt.on_duplicate_key_update(**{field: stmt.inserted[field] for field in update_fields})
    return None


class StorageGateway:
    """Access to the relational store, with an explicit "not configured" state."""

    def __init__(self, database_uri=None, timeout=5.0, enabled=True):
        self.database_uri = database_uri
        self.timeout = timeout
        self.configured = bool(database_uri) and enabled

    @classmethod
    def from_config(cls, config):
        return cls(
            database_uri=config.get('SQLALCHEMY_DATABASE_URI'),
            timeout=config.get('STORE_TIMEOUT_SECONDS', 5.0),
            enabled=config.get('AQI_STORE_ENABLED', True),
        )

    def __repr__(self):
        return f'<StorageGateway configured={self.configured}>'

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    def is_available(self):
        """Whether a real store is configured and answers a trivial query."""
        if not self.configured:
            return False
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning('Store unreachable: %s', e)
            return False

    def _read(self, description, query):
        """Run `query()` and wrap its outcome in a StoreResult."""
        if not self.configured:
            return StoreResult.unavailable('store not configured')
        try:
            value = query()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning('Store read failed (%s): %s', description, e)
            return StoreResult.unavailable(UNAVAILABLE_REASON)
        if value is None or value == []:
            return StoreResult.empty()
        return StoreResult.ok(value)

    def _write(self, description, apply):
        if not self.configured:
            raise StoreUnavailable('store not configured')
        try:
            obj = apply()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning('Store write failed (%s): %s', description, e)
            raise StoreWriteError(f'{description}: {e}') from e
        return obj

    # ------------------------------------------------------------------
    # Cities
    # ------------------------------------------------------------------

    def list_cities(self):
        return self._read('list cities', lambda: [
            c.to_dict() for c in City.query.order_by(City.id).all()
        ])

    def read_city(self, city_id):
        def query():
            city = db.session.get(City, city_id)
            return city.to_dict() if city else None
        return self._read(f'city {city_id}', query)

    # ------------------------------------------------------------------
    # Readings
    # ------------------------------------------------------------------

    def read_latest_reading(self, city_id):
        def query():
            latest = AQIReading.query.filter_by(city_id=city_id)\
                .order_by(AQIReading.recorded_at.desc()).first()
            return latest.to_dict() if latest else None
        return self._read(f'latest reading for city {city_id}', query)

    def read_readings_since(self, city_id, since):
        """Readings recorded at or after `since`, oldest first."""
        return self._read(f'readings for city {city_id}', lambda: [
            r.to_dict() for r in AQIReading.query
            .filter(AQIReading.city_id == city_id, AQIReading.recorded_at >= since)
            .order_by(AQIReading.recorded_at.asc()).all()
        ])

    def insert_reading(self, reading):
        """Insert a reading dict and return it as stored."""
        def apply():
            row = AQIReading(city_id=reading['city_id'], recorded_at=_as_datetime(reading['recorded_at']))
            for field in READING_FIELDS:
                setattr(row, field, reading.get(field))
            db.session.add(row)
            return row
        return self._write(f"insert reading for city {reading['city_id']}", apply).to_dict()

    # ------------------------------------------------------------------
    # Forecasts
    # ------------------------------------------------------------------

    def read_forecasts(self, city_id, start, days):
        """Stored forecasts for `days` consecutive dates from `start`, nearest first."""
        end = start + timedelta(days=days - 1)
        return self._read(f'forecasts for city {city_id}', lambda: [
            f.to_dict() for f in AQIForecast.query
            .filter(AQIForecast.city_id == city_id,
                    AQIForecast.forecast_date >= start,
                    AQIForecast.forecast_date <= end)
            .order_by(AQIForecast.forecast_date.asc()).all()
        ])

    def upsert_forecast(self, forecast):
        """Insert or replace the forecast for (city_id, forecast_date); last write wins.

        Runs as a single keyed INSERT ... ON CONFLICT statement, so a row
        inserted concurrently for the same key is overwritten rather than
        failing the write.
        """
        city_id = forecast['city_id']
        forecast_date = _as_date(forecast['forecast_date'])
        values = {field: forecast.get(field) for field in FORECAST_FIELDS}
        values['created_at'] = datetime.utcnow()

        def apply():
            stmt = _keyed_upsert(dict(values, city_id=city_id, forecast_date=forecast_date), list(values))
            if stmt is not None:
                db.session.execute(stmt)
            else:
                row = AQIForecast.query.filter_by(city_id=city_id, forecast_date=forecast_date).first()
                if row is None:
                    row = AQIForecast(city_id=city_id, forecast_date=forecast_date)
                    db.session.add(row)
                for field, value in values.items():
                    setattr(row, field, value)
                db.session.flush()
            return AQIForecast.query.filter_by(city_id=city_id, forecast_date=forecast_date)\
                .populate_existing().one().to_dict()
        return self._write(f'upsert forecast for city {city_id} on {forecast_date}', apply)

    # ------------------------------------------------------------------
    # Advisories
    # ------------------------------------------------------------------

    def read_advisory(self, aqi):
        """Advisory whose range contains `aqi` (fractional values round up)."""
        value = int(math.ceil(aqi))

        def query():
            advisory = HealthAdvisory.query.filter(
                HealthAdvisory.aqi_min <= value,
                or_(HealthAdvisory.aqi_max.is_(None), HealthAdvisory.aqi_max >= value),
            ).order_by(HealthAdvisory.aqi_min.desc()).first()
            return advisory.to_dict() if advisory else None
        return self._read(f'advisory for AQI {aqi}', query)

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    def seed_reference_data(self, cities, advisories):
        """Load cities and advisories into empty tables. Returns (cities added, advisories added)."""
        def apply():
            added_cities = added_advisories = 0
            if City.query.first() is None:
                for city in cities:
                    db.session.add(City(**dict(city)))
                    added_cities += 1
            if HealthAdvisory.query.first() is None:
                for advisory in advisories:
                    db.session.add(HealthAdvisory(**advisory))
                    added_advisories += 1
            return added_cities, added_advisories
        return self._write('seed reference data', apply)
