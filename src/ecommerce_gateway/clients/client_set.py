"""Process-scoped set of backend clients.

Built once at startup and shared by every request. Nothing on the set is
reassigned after construction, so no locking is needed around it.
"""

import logging
from dataclasses import dataclass

import httpx

from ecommerce_gateway.config import Settings, get_settings
from ecommerce_gateway.errors import BackendConnectionError
from ecommerce_gateway.protocols import AuthBackend, CategoryBackend, OrderBackend, ProductBackend

from .auth_client import AuthServiceClient
from .catalog_clients import CategoryServiceClient, ProductServiceClient
from .order_client import OrderServiceClient
from .rpc_channel import RpcChannel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendClients:
    """One client per backend plus the channels that carry them.

    Example:
        ```python
        clients = await BackendClients.connect()
        product = await clients.product.get_product_by_id("p1")
        await clients.aclose()
        ```
    """

    category: CategoryBackend
    product: ProductBackend
    order: OrderBackend
    auth: AuthBackend
    channels: tuple[RpcChannel, ...] = ()

    @classmethod
    async def connect(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "BackendClients":
        """Open one channel per backend and build the client set.

        Category and product live on the same catalog endpoint but still get
        a channel each. If any channel fails to open, the ones already opened
        are closed before the error propagates.

        Args:
            settings: Endpoint configuration. If None, uses settings.
            transport: Optional httpx transport shared by all channels (tests).

        Returns:
            The connected client set

        Raises:
            BackendConnectionError: If any backend channel cannot be opened
        """
        settings = settings or get_settings()
        endpoints = (
            ("category", settings.catalog_service_url),
            ("product", settings.catalog_service_url),
            ("order", settings.order_service_url),
            ("auth", settings.auth_service_url),
        )

        opened: list[RpcChannel] = []
        for name, url in endpoints:
            try:
                opened.append(RpcChannel.open(name, url, settings.rpc_timeout, transport))
            except Exception as e:
                await close_channels(opened)
                raise BackendConnectionError(
                    f"Failed to open {name} backend channel at {url}: {e}"
                ) from e

        category_channel, product_channel, order_channel, auth_channel = opened
        return cls(
            category=CategoryServiceClient(category_channel),
            product=ProductServiceClient(product_channel),
            order=OrderServiceClient(order_channel),
            auth=AuthServiceClient(auth_channel),
            channels=tuple(opened),
        )

    async def aclose(self) -> None:
        """Close every channel in the set.

        Raises:
            Exception: The first close failure, after all channels were tried
        """
        first_error = await close_channels(self.channels)
        if first_error is not None:
            raise first_error


async def close_channels(
    channels: list[RpcChannel] | tuple[RpcChannel, ...],
) -> Exception | None:
    """Close all channels, attempting each even if an earlier one fails.

    Failures are logged; the first one is returned for the caller to raise.
    """
    first_error: Exception | None = None
    for channel in channels:
        try:
            await channel.aclose()
        except Exception as e:
            logger.warning("Failed to close %s backend channel: %s", channel.name, e)
            if first_error is None:
                first_error = e

    return first_error
