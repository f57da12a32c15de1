"""Account roles stored in the ``role`` column of the user table."""

from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    """Closed set of account roles.

    The member value is the storage representation written to the table.
    """

    INACTIVE = "INACTIVE"
    RESTRICTED = "RESTRICTED"
    REGULAR = "REGULAR"
    ADMIN = "ADMIN"

    @classmethod
    def from_storage(cls, value: str) -> UserRole:
        """Decode a stored role value.

        :param value: The string read from the ``role`` column
        :return: The matching role
        :raises ValueError: If the value is not one of the known roles
        """
        try:
            return cls(value)
        except ValueError:
            msg = f"Unknown user role: {value!r}"
            raise ValueError(msg) from None
