"""
Error types shared by the services and the API layer.
"""


class AQIDashboardError(Exception):
    """Base class for all dashboard errors."""


class StoreUnavailable(AQIDashboardError):
    """The backing store is not configured, not reachable, or missing tables."""


class StoreWriteError(AQIDashboardError):
    """A reading or forecast could not be written."""


class NotFound(AQIDashboardError, LookupError):
    """A specific record (city, reading, advisory range) does not exist."""


class InvalidInput(AQIDashboardError, ValueError):
    """A request argument is out of range (e.g. a non-positive day count)."""
