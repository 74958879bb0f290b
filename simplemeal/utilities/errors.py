"""Exceptions raised by the SimpleMeal core."""


class SimpleMealError(Exception):
    """Base class for errors the core reports to its callers."""


class DeepLinkError(SimpleMealError, ValueError):
    """An inbound share link could not be decoded.

    ``reason`` is one of: bad_url, bad_scheme, unknown_kind, missing_data,
    bad_encoding, bad_payload.
    """

    def __init__(self, reason: str, message: str = ""):
        super().__init__(message or reason)
        self.reason = reason


class PersistenceError(SimpleMealError):
    """The datastore failed to save. Recoverable; the caller decides what to tell the user."""


__all__ = ['SimpleMealError', 'DeepLinkError', 'PersistenceError']
