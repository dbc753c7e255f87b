"""
Services Package

Exports all services for easy importing.
"""

from aqi_dashboard.services.aqi import classify, quality_category, risk_level
from aqi_dashboard.services.baseline import baseline_for
from aqi_dashboard.services.simulation import synthesize_readings, simulate_live_reading
from aqi_dashboard.services.forecast import generate_forecast, generate_mock_forecast
from aqi_dashboard.services.storage import StorageGateway

__all__ = [
    'classify',
    'quality_category',
    'risk_level',
    'baseline_for',
    'synthesize_readings',
    'simulate_live_reading',
    'generate_forecast',
    'generate_mock_forecast',
    'StorageGateway',
]
