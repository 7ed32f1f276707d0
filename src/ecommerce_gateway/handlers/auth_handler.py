"""HTTP handler for logging in."""

import logging

from ecommerce_gateway.dto import Envelope, LoginRequest, TokenResponse
from ecommerce_gateway.errors import AuthDenied, RpcError, translate_rpc_error
from ecommerce_gateway.protocols import AuthBackend

logger = logging.getLogger(__name__)


class AuthHandler:
    """HTTP handler for POST /login.

    Login is the one route that runs without the authorization gate.
    """

    def __init__(self, auth: AuthBackend) -> None:
        self._auth = auth

    async def login(self, request: LoginRequest) -> Envelope[TokenResponse]:
        """Handle POST /login requests.

        Credentials the auth backend refuses are answered with 401, not 500.

        Returns:
            Envelope with the issued token

        Raises:
            AuthDenied: If the auth backend refused the credentials
            TransportError: If the auth backend was unreachable
        """
        try:
            token = await self._auth.login(request.username, request.password)
        except RpcError as e:
            logger.warning("Login failed for %s: %s", request.username, e.message)
            raise translate_rpc_error(e, AuthDenied) from e

        return Envelope[TokenResponse](data=TokenResponse.model_validate(token))
