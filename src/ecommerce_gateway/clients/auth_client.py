"""RPC client for the auth backend."""

from typing import Any

from ecommerce_gateway.entities import PageWindow

from .messages import window_message
from .rpc_channel import RpcChannel


class AuthServiceClient:
    """RPC client satisfying the AuthBackend protocol."""

    SERVICE = "AuthService"

    def __init__(self, channel: RpcChannel) -> None:
        self._channel = channel

    async def login(self, username: str, password: str) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE, "Login", {"username": username, "password": password}
        )

    async def has_access(self, token: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "HasAccess", {"token": token})

    async def create_user(self, username: str, password: str, user_type: str) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE,
            "CreateUser",
            {"username": username, "password": password, "user_type": user_type},
        )

    async def get_user_by_id(self, user_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetUserByID", {"id": user_id})

    async def get_user_list(self, window: PageWindow) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetUserList", window_message(window))

    async def update_user(self, user_id: str, password: str) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE, "UpdateUser", {"id": user_id, "password": password}
        )

    async def delete_user(self, user_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "DeleteUser", {"id": user_id})
