"""
Models Package

Exports all models for easy importing.
"""

from aqi_dashboard.models.city import City
from aqi_dashboard.models.reading import AQIReading
from aqi_dashboard.models.forecast import AQIForecast
from aqi_dashboard.models.advisory import HealthAdvisory

__all__ = ['City', 'AQIReading', 'AQIForecast', 'HealthAdvisory']
