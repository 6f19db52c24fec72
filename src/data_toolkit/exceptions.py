"""
Exceptions - Error hierarchy for the data toolkit

Helpers that hit a programmer error (bad arguments, impossible requests)
raise one of these. Lookups that simply find nothing return a sentinel
instead.

License: MIT
"""


class DataToolkitError(Exception):
    """Base class for all errors raised by the toolkit."""


class InvalidArgumentError(DataToolkitError, ValueError):
    """Raised when a helper is called with arguments it can not work with."""


class ConfigurationError(DataToolkitError, ValueError):
    """Raised when the loaded configuration fails validation."""
