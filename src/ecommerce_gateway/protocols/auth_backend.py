"""Auth backend protocol.

The auth backend owns user accounts and credential validation. Besides the
user CRUD operations it exposes ``login`` and ``has_access``; the latter is
the single source of truth for whether a credential is valid.
"""

from typing import Any, Protocol, runtime_checkable

from ecommerce_gateway.entities import PageWindow


@runtime_checkable
class AuthBackend(Protocol):
    """Protocol for the auth service."""

    async def login(self, username: str, password: str) -> dict[str, Any]:
        """Exchange credentials for a token.

        Returns:
            Response message with a ``token`` field
        """
        ...

    async def has_access(self, token: str) -> dict[str, Any]:
        """Validate a bearer credential.

        Returns:
            Response message with ``has_access`` (bool) and, when granted,
            ``user`` carrying ``id``, ``username`` and ``user_type``
        """
        ...

    async def create_user(self, username: str, password: str, user_type: str) -> dict[str, Any]:
        ...

    async def get_user_by_id(self, user_id: str) -> dict[str, Any]:
        ...

    async def get_user_list(self, window: PageWindow) -> dict[str, Any]:
        ...

    async def update_user(self, user_id: str, password: str) -> dict[str, Any]:
        ...

    async def delete_user(self, user_id: str) -> dict[str, Any]:
        ...
