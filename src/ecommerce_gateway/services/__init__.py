"""Service layer for cross-backend orchestration.

Resources that map onto a single backend call go straight from their
handler to the backend client. Resources that span backends get a service
here.

Architecture:
    Handler -> Service -> Backend client
    (HTTP)  -> (Aggregation) -> (RPC)
"""

from .order_service import OrderService

__all__ = [
    "OrderService",
]
