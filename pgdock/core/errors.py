"""Errors raised by pgdock services."""


class PgDockError(Exception):
    """Base error for this package."""


class ServiceStartError(PgDockError):
    """Raised when the compose service could not be started."""
