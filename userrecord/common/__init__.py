"""Common data models for user records."""

from .errors import MissingSourceError, MissingTargetError, UserRecordError
from .roles import UserRole
from .user import UID_LIMIT, USER_FIELDS, DisplayOptions, User, UserBase

__all__ = [
    "UID_LIMIT",
    "USER_FIELDS",
    "DisplayOptions",
    "MissingSourceError",
    "MissingTargetError",
    "User",
    "UserBase",
    "UserRecordError",
    "UserRole",
]
