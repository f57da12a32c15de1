"""Validated views over user records."""

from pydantic import BaseModel, Field

from userrecord.common import UID_LIMIT, UserBase, UserRole


class UserModel(UserBase, BaseModel):
    """Pydantic view of a user record.

    Raw input is validated when the model is built with ``model_validate``;
    fields copied in from another user value are taken as they are.

    :param str | None name: Display name
    :param int | None uid: Unsigned 32-bit identifier
    :param str | None password: Opaque credential material
    :param str | None google_id: Subject id from the Google identity provider
    :param UserRole | None role: The account role
    """

    name: str | None = None
    uid: int | None = Field(default=None, ge=0, lt=UID_LIMIT)
    password: str | None = Field(default=None, repr=False)
    google_id: str | None = None
    role: UserRole | None = None
