"""Caller identity domain entities."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Closed set of roles the auth backend assigns to users."""

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def parse(cls, value: str | None) -> "Role | None":
        """Parse a backend role tag, returning None for unknown tags."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Identity:
    """Result of validating a request's credential.

    Produced once per request by the authorization gate and handed to the
    route handler as an argument. Never persisted.

    Attributes:
        has_access: Whether the auth backend accepted the credential
        role: The user's role, or None if the backend sent an unknown tag
        user_id: Identifier of the authenticated user, if reported
        username: Name of the authenticated user, if reported
    """

    has_access: bool
    role: Role | None = None
    user_id: str | None = None
    username: str | None = None
