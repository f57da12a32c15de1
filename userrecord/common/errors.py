"""Custom exceptions for the user record module."""


class UserRecordError(Exception):
    """Base class for errors raised by user records."""

    pass


class MissingSourceError(UserRecordError):
    """Raised when fields are copied from a source that is None."""

    pass


class MissingTargetError(UserRecordError):
    """Raised when fields are copied into a target that is None."""

    pass
