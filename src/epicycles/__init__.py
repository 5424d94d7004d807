"""Epicycles - Animate closed paths as sums of rotating vectors.

Every closed curve is a chorus of circles spinning at integer frequencies.
"""

__version__ = "0.1.0"


class EpicyclesError(Exception):
    """Base exception for all Epicycles errors."""

    pass


class PathError(EpicyclesError):
    """Raised when a path cannot be built or interpreted."""

    pass


class ConfigurationError(EpicyclesError):
    """Raised when configuration is invalid or missing."""

    pass
