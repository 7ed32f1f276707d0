"""RPC client for the order backend."""

from typing import Any

from ecommerce_gateway.entities import PageWindow

from .messages import window_message
from .rpc_channel import RpcChannel


class OrderServiceClient:
    """RPC client satisfying the OrderBackend protocol."""

    SERVICE = "OrderService"

    def __init__(self, channel: RpcChannel) -> None:
        self._channel = channel

    async def create_order(
        self,
        product_id: str,
        quantity: int,
        user_name: str,
        user_address: str,
        user_phone: str,
    ) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE,
            "CreateOrder",
            {
                "product_id": product_id,
                "quantity": quantity,
                "user_name": user_name,
                "user_address": user_address,
                "user_phone": user_phone,
            },
        )

    async def get_order_by_id(self, order_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetOrderById", {"id": order_id})

    async def get_order_list(self, window: PageWindow) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetOrderList", window_message(window))
