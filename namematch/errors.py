"""Exception types raised by namematch."""


class NameMatchError(Exception):
    """Base class for all namematch errors."""


class InvalidArgumentError(NameMatchError, ValueError):
    """A request was malformed (empty query, missing name, bad field)."""


class RecordNotFoundError(NameMatchError, LookupError):
    """No active record exists with the requested id."""

    def __init__(self, record_id: int):
        super().__init__(f"Record not found: {record_id}")
        self.record_id = record_id


class RecordStoreError(NameMatchError):
    """The record or user file could not be read or written."""


class AuthenticationError(NameMatchError):
    """Credentials or a session token were rejected."""
