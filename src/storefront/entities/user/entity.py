"""User domain entity."""

from typing import Any

from pydantic import Field, field_validator

from src.storefront.entities._base import Entity


def normalize_email(email_address: str) -> str:
    return email_address.strip().lower()


class User(Entity):
    """A person allowed to sign in and manage the catalog.

    Only the password digest is ever stored; see ``core.security`` for hashing.
    """

    email_address: str = Field(description="Login email address, normalized")
    password_digest: str = Field(description="Password hash")

    @field_validator("email_address")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return self.id == other.id and self.email_address == other.email_address

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.email_address))
