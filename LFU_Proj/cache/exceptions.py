# Errors raised by the cache package


class CacheError(Exception):
    """Base class for cache errors."""


class InvalidArgumentError(CacheError, ValueError):
    """Raised when a cache is constructed with an unusable capacity or TTL."""
