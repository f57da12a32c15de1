"""In-memory records for rows of the user table."""

from .common import (
    MissingSourceError,
    MissingTargetError,
    User,
    UserBase,
    UserRecordError,
    UserRole,
)
from .config import AppConfig, load_config_from_env
from .models import UserModel
from .rows import UserRow

__all__ = [
    "AppConfig",
    "MissingSourceError",
    "MissingTargetError",
    "User",
    "UserBase",
    "UserModel",
    "UserRecordError",
    "UserRole",
    "UserRow",
    "load_config_from_env",
]
