"""HTTP handlers for user operations.

User accounts are owned by the auth backend.
"""

import logging

from ecommerce_gateway.dto import CreateUserRequest, Envelope, ResourceList, UpdateUserRequest, User
from ecommerce_gateway.entities import Identity, PageWindow
from ecommerce_gateway.errors import (
    BackendFailure,
    NotFoundError,
    RpcError,
    UpstreamRejection,
    translate_rpc_error,
    translate_update_error,
)
from ecommerce_gateway.protocols import AuthBackend

logger = logging.getLogger(__name__)


class UserHandler:
    """HTTP handlers for the user resource."""

    def __init__(self, auth: AuthBackend) -> None:
        self._auth = auth

    async def create_user(self, identity: Identity, request: CreateUserRequest) -> Envelope[User]:
        """Handle POST /user requests."""
        try:
            user = await self._auth.create_user(
                username=request.username,
                password=request.password,
                user_type=request.user_type,
            )
        except RpcError as e:
            raise translate_rpc_error(e, UpstreamRejection) from e

        logger.info("User %s created by %s", user.get("id"), identity.username)
        return Envelope[User](data=User.model_validate(user))

    async def get_user(self, identity: Identity, user_id: str) -> Envelope[User]:
        """Handle GET /user/{id} requests."""
        try:
            user = await self._auth.get_user_by_id(user_id)
        except RpcError as e:
            raise translate_rpc_error(e, NotFoundError) from e

        return Envelope[User](data=User.model_validate(user))

    async def list_users(self, identity: Identity, window: PageWindow) -> Envelope[ResourceList]:
        """Handle GET /user requests."""
        try:
            users = await self._auth.get_user_list(window)
        except RpcError as e:
            raise translate_rpc_error(e, BackendFailure) from e

        return Envelope[ResourceList](data=users)

    async def update_user(self, identity: Identity, request: UpdateUserRequest) -> Envelope[User]:
        """Handle PUT /user requests."""
        try:
            user = await self._auth.update_user(request.id, request.password)
        except RpcError as e:
            raise translate_update_error(e) from e

        logger.info("User %s updated by %s", request.id, identity.username)
        return Envelope[User](data=User.model_validate(user))

    async def delete_user(self, identity: Identity, user_id: str) -> Envelope[User]:
        """Handle DELETE /user/{id} requests."""
        try:
            user = await self._auth.delete_user(user_id)
        except RpcError as e:
            raise translate_rpc_error(e, UpstreamRejection) from e

        logger.info("User %s deleted by %s", user_id, identity.username)
        return Envelope[User](data=User.model_validate(user))
