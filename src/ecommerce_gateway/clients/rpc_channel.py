"""Unary RPC channel to one backend.

Backends are called with the Connect protocol's JSON encoding: every unary
call is ``POST /<package>.<Service>/<Method>`` with the request message as a
JSON body. Field names follow proto3 JSON (``categoryTitle``) on the wire
and the proto field names (``category_title``) everywhere else.
A 2xx response carries the response message; any other status
carries a Connect error body ``{"code": ..., "message": ...}``.

One channel holds one long-lived ``httpx.AsyncClient`` for the lifetime of
the process. No retries are performed at this layer.
"""

import logging
from typing import Any

import httpx

from ecommerce_gateway.errors import RpcError, RpcTransportError

from .messages import decode_message, encode_message

logger = logging.getLogger(__name__)

PROTO_PACKAGE = "e_commerce"

# Error codes that mean the call never reached a working backend handler
TRANSPORT_CODES = frozenset({"unavailable", "deadline_exceeded", "unimplemented"})

# Connect's HTTP status to error code mapping, used when a response has no error body
HTTP_STATUS_CODES = {
    400: "internal",
    401: "unauthenticated",
    403: "permission_denied",
    404: "unimplemented",
    429: "unavailable",
    502: "unavailable",
    503: "unavailable",
    504: "unavailable",
}


class RpcChannel:
    """Persistent connection to a single backend service.

    Example:
        ```python
        channel = RpcChannel.open("catalog", "http://localhost:9001", timeout=30.0)
        category = await channel.call(
            "CategoryService", "GetCategoryById", {"id": "c1"}
        )
        await channel.aclose()
        ```
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the channel.

        Args:
            name: Backend name used in log lines (e.g. "category")
            base_url: Scheme, host and port of the backend
            timeout: Per-call timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        url = httpx.URL(base_url)
        if not url.host:
            raise ValueError(f"Backend URL for {name} has no host: {base_url!r}")

        self._name = name
        self._base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=url,
            timeout=timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "Connect-Protocol-Version": "1",
            },
        )

    @classmethod
    def open(
        cls,
        name: str,
        base_url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RpcChannel":
        """Factory method to open a channel to a backend.

        Raises:
            ValueError: If the backend URL is unusable
            httpx.InvalidURL: If the backend URL cannot be parsed
        """
        channel = cls(name=name, base_url=base_url, timeout=timeout, transport=transport)
        logger.info("Opened %s backend channel at %s", name, base_url)
        return channel

    @property
    def name(self) -> str:
        """Get the backend name."""
        return self._name

    @property
    def is_closed(self) -> bool:
        """Whether the underlying connection has been closed."""
        return self._client.is_closed

    async def call(self, service: str, method: str, message: dict[str, Any]) -> dict[str, Any]:
        """Perform one unary call.

        Args:
            service: Service name inside the proto package (e.g. "ProductService")
            method: Method name (e.g. "GetProductById")
            message: Request message fields

        Returns:
            The decoded response message

        Raises:
            RpcTransportError: If the backend could not be reached or answered
                with a transport-level status
            RpcError: If the backend reported a failure
        """
        path = f"/{PROTO_PACKAGE}.{service}/{method}"
        logger.debug("RPC %s %s", self._name, path)

        try:
            response = await self._client.post(path, json=encode_message(message))
        except httpx.TimeoutException as e:
            raise RpcTransportError("deadline_exceeded", str(e) or "backend call timed out") from e
        except httpx.TransportError as e:
            raise RpcTransportError("unavailable", str(e) or "backend unreachable") from e

        if not response.is_success:
            raise self._error_from_response(response)

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as e:
            raise RpcTransportError("internal", f"invalid response from {self._name} backend: {e}") from e
        return decode_message(body)

    def _error_from_response(self, response: httpx.Response) -> RpcError:
        """Decode a Connect error body, falling back to the HTTP status."""
        code = HTTP_STATUS_CODES.get(response.status_code, "unknown")
        message = response.reason_phrase or f"HTTP {response.status_code}"

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            code = body.get("code") or code
            message = body.get("message") or message

        if code in TRANSPORT_CODES:
            return RpcTransportError(code, message)
        return RpcError(code, message)

    async def aclose(self) -> None:
        """Close the connection. Safe to call more than once."""
        if not self._client.is_closed:
            await self._client.aclose()
            logger.info("Closed %s backend channel", self._name)
