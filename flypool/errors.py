"""
flypool Errors
==============

Exceptions raised by the flyweight pool.
"""


class FlyweightError(Exception):
    """Base class for flyweight pool errors."""

    pass


class InvalidKeyError(FlyweightError, ValueError):
    """Raised when key validation is enabled and a key is None or empty."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Invalid flyweight key: {key!r}")
