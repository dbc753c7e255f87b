"""
Dashboard Blueprint

JSON API consumed by the dashboard front end.
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from aqi_dashboard.dashboard import routes  # noqa: E402, F401
