"""
Dashboard Routes

JSON endpoints for cities, current/historical AQI, forecasts and health
advisories. Every successful response has the shape
{"success": true, "data": ..., "source": "database"|"mock", "message": ...}.
"""

import random

from flask import current_app, jsonify, request
from aqi_dashboard.dashboard import dashboard_bp
from aqi_dashboard.dashboard import services
from aqi_dashboard.errors import InvalidInput, NotFound
from aqi_dashboard.results import DataResult
from aqi_dashboard.services.simulation import validate_days


def _store():
    return current_app.extensions['aqi_store']


def _rng():
    """Fresh random source per request, seeded when AQI_RANDOM_SEED is set."""
    return random.Random(current_app.config.get('AQI_RANDOM_SEED'))


def _number_arg(name, default=None, cast=int):
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        raise InvalidInput(f'{name} must be a number, got {raw!r}') from None


def _days(value):
    return validate_days(value, maximum=current_app.config['MAX_DAYS'])


def _respond(result, data=None):
    return jsonify({
        'success': True,
        'data': result.data if data is None else data,
        'source': result.source,
        'message': result.message,
    })


@dashboard_bp.errorhandler(InvalidInput)
def invalid_input(error):
    return jsonify({'success': False, 'error': str(error)}), 400


@dashboard_bp.errorhandler(NotFound)
def not_found(error):
    return jsonify({'success': False, 'error': str(error)}), 404


@dashboard_bp.route('/status')
def status():
    """Report whether the backing store is in use"""
    return jsonify({'success': True, 'data': services.store_status(_store())})


@dashboard_bp.route('/cities')
def cities():
    """List cities, filtered by ?state=, ?type= and ?q="""
    result = services.list_cities(
        _store(),
        state=request.args.get('state') or None,
        city_type=request.args.get('type') or None,
        search=request.args.get('q') or None,
    )
    return _respond(result)


@dashboard_bp.route('/cities/<int:city_id>')
def city_detail(city_id):
    city = services.get_city(_store(), city_id)
    return jsonify({'success': True, 'data': city})


@dashboard_bp.route('/aqi/current/<int:city_id>', methods=['GET', 'POST'])
def current_aqi(city_id):
    """Current reading plus its health advisory. POST simulates and stores a fresh reading."""
    store = _store()
    rng = _rng()

    if request.method == 'POST':
        reading = services.refresh_current_reading(store, city_id, rng=rng)
    else:
        reading = services.get_current_reading(store, city_id, rng=rng)
    advisory = services.get_health_advisory(store, reading.data['aqi_value'])

    if reading.is_fallback or advisory.is_fallback:
        result = DataResult.fallback(None, reading.message or advisory.message)
    else:
        result = DataResult.from_store(None)
    return _respond(result, data={
        'city_id': city_id,
        'aqi': reading.data,
        'health_advisory': advisory.data,
    })


@dashboard_bp.route('/aqi/historical/<int:city_id>')
def historical_aqi(city_id):
    """Daily history for ?days= (default HISTORY_DEFAULT_DAYS) and optional ?pollutant="""
    days = _days(_number_arg('days', current_app.config['HISTORY_DEFAULT_DAYS']))
    pollutant = request.args.get('pollutant') or None
    result = services.get_historical_readings(_store(), city_id, days, pollutant=pollutant, rng=_rng())
    return _respond(result, data={
        'city_id': city_id,
        'days': days,
        'pollutant': pollutant,
        'readings': result.data,
    })


@dashboard_bp.route('/aqi/forecast/<int:city_id>', methods=['GET', 'POST'])
def forecast_aqi(city_id):
    """Forecast for ?days=. POST {"days": n, "force_refresh": bool} regenerates."""
    config = current_app.config
    if request.method == 'POST':
        body = request.get_json(silent=True) or {}
        days = body.get('days', config['FORECAST_DEFAULT_DAYS'])
        force_refresh = bool(body.get('force_refresh', True))
    else:
        days = _number_arg('days', config['FORECAST_DEFAULT_DAYS'])
        force_refresh = False

    days = _days(days)
    result = services.get_forecast(_store(), city_id, days, force_refresh=force_refresh,
                                   history_days=config['FORECAST_HISTORY_DAYS'], rng=_rng())
    return _respond(result, data={
        'city_id': city_id,
        'days': days,
        'forecasts': result.data,
    })


@dashboard_bp.route('/health/advisory')
def health_advisory():
    """Advisory for ?aqi="""
    aqi = _number_arg('aqi', cast=float)
    if aqi is None:
        raise InvalidInput('aqi query parameter is required')
    result = services.get_health_advisory(_store(), aqi)
    return _respond(result)
