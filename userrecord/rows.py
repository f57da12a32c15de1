"""Column mapping between user records and the user table.

The persistence layer owns connections and SQL. This module only turns
stored column values into user fields and back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from userrecord.common import UID_LIMIT, USER_FIELDS, UserBase, UserRole

if TYPE_CHECKING:
    from collections.abc import Mapping

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)


@dataclass
class UserRow(UserBase):
    """A user table row in storage form.

    :cvar COLUMNS: Column names in table order
    """

    COLUMNS: ClassVar[tuple[str, ...]] = USER_FIELDS

    name: str | None = None
    uid: int | None = None
    password: str | None = None
    google_id: str | None = None
    role: UserRole | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> UserRow:
        """Build a row from stored column values.

        Works with any mapping keyed by column name, including
        ``sqlite3.Row``. Missing columns are read as None.

        :param mapping: Column values keyed by column name
        :return: The decoded row
        :raises ValueError: If the stored role is not a known role
        """
        keys = set(mapping.keys())
        values = {
            column: mapping[column] if column in keys else None
            for column in cls.COLUMNS
        }

        role = values["role"]
        if role is not None:
            values["role"] = UserRole.from_storage(role)

        LOGGER.debug("Decoded user row with uid %s", values["uid"])
        return cls(**values)

    def to_params(self) -> tuple[Any, ...]:
        """Encode the row as query parameters in column order.

        :return: Values for ``name, uid, password, google_id, role``
        :raises ValueError: If uid does not fit an unsigned 32-bit column
        """
        if self.uid is not None and not 0 <= self.uid < UID_LIMIT:
            msg = f"uid {self.uid} does not fit an unsigned 32-bit column"
            raise ValueError(msg)

        role = self.role.value if self.role is not None else None
        return (self.name, self.uid, self.password, self.google_id, role)
