"""
Result Types

Store reads and service calls return tagged results instead of raising, so the
API layer can tell real data from estimated data and say so in the response.
"""

from collections import namedtuple


class StoreResult(namedtuple('StoreResult', ['status', 'value', 'error'])):
    """Outcome of a single Storage Gateway read."""

    OK = 'ok'
    EMPTY = 'empty'
    UNAVAILABLE = 'unavailable'

    __slots__ = ()

    @classmethod
    def ok(cls, value):
        return cls(cls.OK, value, None)

    @classmethod
    def empty(cls):
        return cls(cls.EMPTY, None, None)

    @classmethod
    def unavailable(cls, error):
        return cls(cls.UNAVAILABLE, None, str(error))

    @property
    def has_data(self):
        return self.status == self.OK


class DataResult(namedtuple('DataResult', ['data', 'source', 'message'])):
    """Best-effort payload handed to the UI, tagged with where it came from."""

    DATABASE = 'database'
    MOCK = 'mock'

    __slots__ = ()

    @classmethod
    def from_store(cls, data):
        return cls(data, cls.DATABASE, None)

    @classmethod
    def fallback(cls, data, message):
        return cls(data, cls.MOCK, message)

    @property
    def is_fallback(self):
        return self.source == self.MOCK
