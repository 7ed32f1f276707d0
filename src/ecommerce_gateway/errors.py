"""Error taxonomy for the gateway.

Two families live here:

- RPC errors, raised by the backend clients. ``RpcError`` is a failure the
  backend reported itself; ``RpcTransportError`` means the backend could not
  be reached or the call broke at the network level.
- Gateway errors, raised by the gate and the handlers. Each one is an
  ``HTTPException`` carrying the status code it renders with, so FastAPI stops
  the request at the point it is raised and the app's exception handler turns
  it into an ``{"error": ...}`` envelope.

Backend messages are forwarded verbatim in both directions.
"""

from fastapi import HTTPException, status


class RpcError(Exception):
    """A backend call failed with a status reported by the backend."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class RpcTransportError(RpcError):
    """A backend call failed before the backend could answer."""


class BackendConnectionError(RuntimeError):
    """The backend client set could not be constructed."""


class GatewayError(HTTPException):
    """Base class for request-scoped gateway failures."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(status_code=self.http_status, detail=message)
        self.message = message


class BindingError(GatewayError):
    """Caller input is missing or malformed; no backend was called."""

    http_status = status.HTTP_400_BAD_REQUEST


class UpstreamRejection(GatewayError):
    """A backend refused a write as the caller's fault."""

    http_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(GatewayError):
    http_status = status.HTTP_404_NOT_FOUND


class AuthDenied(GatewayError):
    http_status = status.HTTP_401_UNAUTHORIZED


class TransportError(GatewayError):
    """A backend was unreachable or the RPC broke at the network level."""


class BackendFailure(GatewayError):
    """A backend reported a failure the gateway treats as a server error."""


# Backend codes that describe a bad request rather than a missing target
REJECTION_CODES = frozenset(
    {"invalid_argument", "failed_precondition", "already_exists", "out_of_range"}
)


def translate_rpc_error(error: RpcError, rejection: type[GatewayError]) -> GatewayError:
    """Map an RPC failure onto the gateway error for the current operation.

    Transport failures always become ``TransportError`` (500). A failure the
    backend reported becomes ``rejection``, which each operation picks:
    ``UpstreamRejection`` for creates and deletes, ``NotFoundError`` for reads,
    ``BackendFailure`` for lists, ``AuthDenied`` for login.

    Args:
        error: The error raised by a backend client
        rejection: Gateway error class for backend-reported failures

    Returns:
        The gateway error to raise
    """
    if isinstance(error, RpcTransportError):
        return TransportError(error.message)
    return rejection(error.message)


def translate_update_error(error: RpcError) -> GatewayError:
    """Map an RPC failure from an update operation.

    Validation-like backend codes are the caller's fault (400); anything else
    the backend reports is treated as a missing target (404).
    """
    if error.code in REJECTION_CODES:
        return translate_rpc_error(error, UpstreamRejection)
    return translate_rpc_error(error, NotFoundError)
