"""Fundamental user data model for the user table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Self, TypeVar

from .errors import MissingSourceError, MissingTargetError
from .roles import UserRole

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)

USER_FIELDS = ("name", "uid", "password", "google_id", "role")

_REDACTED = "****"

# uid is stored as an unsigned 32-bit integer
UID_LIMIT = 2**32


@dataclass(frozen=True)
class DisplayOptions:
    """Rendering options for user display strings.

    :param null_text: Text written in place of absent values
    :param redact_password: Mask the password when it is set
    """

    null_text: str = "null"
    redact_password: bool = False

    def __post_init__(self) -> None:
        """Reject null text that would add field separators.

        :raises ValueError: If null_text contains a comma
        """
        if "," in self.null_text:
            msg = f"null_text must not contain a comma, got: {self.null_text!r}"
            raise ValueError(msg)


class UserBase:
    """Base class for values carrying the five user fields.

    Any subclass that declares the fields can copy them from, or into,
    any other subclass, whatever its concrete representation.
    """

    name: str | None
    uid: int | None
    password: str | None
    google_id: str | None
    role: UserRole | None

    @classmethod
    def from_user(cls, source: UserBase) -> Self:
        """Create a new instance holding the fields of another user value.

        :param source: The value to copy the fields from
        :return: A new instance of this class
        :raises MissingSourceError: If source is None
        """
        if source is None:
            msg = f"Cannot build {cls.__name__} from a missing user"
            raise MissingSourceError(msg)
        LOGGER.debug("Building %s from %s", cls.__name__, type(source).__name__)
        instance = cls()
        instance.copy_from(source)
        return instance

    def copy_from(self, source: UserBase) -> None:
        """Overwrite every field of this value with the fields of source.

        Source is left untouched.

        :param source: The value to copy the fields from
        :raises MissingSourceError: If source is None
        """
        if source is None:
            msg = f"Cannot copy into {type(self).__name__} from a missing user"
            raise MissingSourceError(msg)

        values = (
            source.name,
            source.uid,
            source.password,
            source.google_id,
            source.role,
        )
        (
            self.name,
            self.uid,
            self.password,
            self.google_id,
            self.role,
        ) = values

    def copy_into(self, target: T) -> T:
        """Copy every field of this value into target.

        :param target: The value receiving the fields
        :return: The target, for chaining conversions
        :raises MissingTargetError: If target is None
        """
        if target is None:
            msg = f"Cannot copy {type(self).__name__} into a missing user"
            raise MissingTargetError(msg)
        target.copy_from(self)
        return target


T = TypeVar("T", bound=UserBase)


@dataclass
class User(UserBase):
    """One row of the user table.

    Every field defaults to None; no field is validated.

    :param name: Display name
    :param uid: Identifier, None until assigned by storage
    :param password: Opaque credential material
    :param google_id: Subject id from the Google identity provider
    :param role: The account role
    """

    name: str | None = None
    uid: int | None = None
    password: str | None = field(default=None, repr=False)
    google_id: str | None = None
    role: UserRole | None = None

    def to_display_string(self, options: DisplayOptions | None = None) -> str:
        """Render the fields for logs and debugging.

        Not a serialization format.

        :param options: Rendering options, defaults to DisplayOptions()
        :return: ``User (name, uid, password, google_id, role)``
        """
        options = options or DisplayOptions()

        def render(value: object) -> str:
            if value is None:
                return options.null_text
            if isinstance(value, UserRole):
                return value.name
            return str(value)

        password = self.password
        if options.redact_password and password is not None:
            password = _REDACTED

        fields = (self.name, self.uid, password, self.google_id, self.role)
        return "User (" + ", ".join(render(value) for value in fields) + ")"

    def __str__(self) -> str:
        return self.to_display_string()
