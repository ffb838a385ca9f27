"""
Error types raised by the social graph engine.

All errors are surfaced to the caller immediately; none are retried
internally.
"""


class SocialGraphError(Exception):
    """Base class for engine errors."""


class InvalidArgument(SocialGraphError, ValueError):
    """An argument is out of range (e.g. count < 1, negative limits)."""


class UnknownEntity(SocialGraphError, LookupError):
    """An identifier is not part of the known user/place universe."""


class DataUnavailable(SocialGraphError, RuntimeError):
    """The data source failed to answer."""
