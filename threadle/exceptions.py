"""Exception types shared across the puzzle service."""


class ThreadleError(Exception):
    """Base class for errors raised by the puzzle service."""


class UpstreamUnavailableError(ThreadleError):
    """The content source could not supply usable material for a puzzle."""


class CacheUnavailableError(ThreadleError):
    """The key-value cache store could not be reached."""
