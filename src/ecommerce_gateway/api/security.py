"""Authorization gate for protected routes.

Every protected route declares an ``AccessPolicy`` when it is registered.
Per request, the gate:

1. takes the credential from the ``Authorization`` header (a missing header
   is sent as an empty credential, the auth backend stays the only judge of
   validity);
2. asks the auth backend whether the credential has access;
3. rejects with 500 if that call fails, 401 "Unauthorized" if access is
   denied, 401 "Permission Denied" if the role is not allowed by the policy;
4. otherwise hands the resulting ``Identity`` to the route handler.

Rejections are raised, so the route handler never runs after one.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header

from ecommerce_gateway.entities import Identity, Role
from ecommerce_gateway.errors import (
    AuthDenied,
    BackendFailure,
    RpcError,
    translate_rpc_error,
)

from .dependencies import BackendClientsDep

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer "

UNAUTHORIZED = "Unauthorized"
PERMISSION_DENIED = "Permission Denied"

# Auth backend codes that mean the credential itself was refused
DENIAL_CODES = frozenset({"unauthenticated", "permission_denied"})


def extract_credential(authorization: str | None) -> str:
    """Get the bearer credential from an Authorization header value.

    A ``Bearer`` scheme prefix is stripped; anything else is sent as is.
    """
    if not authorization:
        return ""
    if authorization[: len(BEARER_SCHEME)].lower() == BEARER_SCHEME:
        return authorization[len(BEARER_SCHEME):].strip()
    return authorization.strip()


@dataclass(frozen=True)
class AccessPolicy:
    """Set of roles a route admits, fixed when the route is registered.

    Attributes:
        allowed_roles: Roles admitted, or None to admit any authenticated caller
    """

    allowed_roles: frozenset[Role] | None = None

    @classmethod
    def any_role(cls) -> "AccessPolicy":
        """Admit any caller the auth backend accepts."""
        return cls()

    @classmethod
    def for_roles(cls, *roles: Role | str) -> "AccessPolicy":
        """Admit only callers holding one of ``roles``.

        Raises:
            ValueError: If no role is given or a role name is unknown
        """
        if not roles:
            raise ValueError("An access policy needs at least one role")
        return cls(allowed_roles=frozenset(Role(role) for role in roles))

    def permits(self, identity: Identity) -> bool:
        """Check whether an admitted identity satisfies this policy."""
        if self.allowed_roles is None:
            return True
        return identity.role in self.allowed_roles


class AuthorizationGate:
    """FastAPI dependency enforcing one access policy.

    Example:
        ```python
        AdminIdentity = Annotated[Identity, Depends(AuthorizationGate(AccessPolicy.for_roles("admin")))]

        @router.delete("/category/{category_id}")
        async def delete_category(category_id: str, identity: AdminIdentity, ...):
            ...
        ```
    """

    def __init__(self, policy: AccessPolicy) -> None:
        self.policy = policy

    async def __call__(
        self,
        clients: BackendClientsDep,
        authorization: Annotated[str | None, Header()] = None,
    ) -> Identity:
        """Validate the request's credential against the auth backend.

        Returns:
            The admitted identity

        Raises:
            AuthDenied: If the credential is refused or the role is not allowed
            TransportError: If the auth backend was unreachable
            BackendFailure: If the auth backend failed the access check
        """
        token = extract_credential(authorization)

        try:
            access = await clients.auth.has_access(token)
        except RpcError as e:
            if e.code in DENIAL_CODES:
                logger.warning("Access check refused credential: %s", e.message)
                raise AuthDenied(UNAUTHORIZED) from e
            logger.warning("Access check failed: %s", e.message)
            raise translate_rpc_error(e, BackendFailure) from e

        if not access.get("has_access"):
            logger.warning("Rejected request without valid credential")
            raise AuthDenied(UNAUTHORIZED)

        user = access.get("user") or {}
        identity = Identity(
            has_access=True,
            role=Role.parse(user.get("user_type")),
            user_id=user.get("id"),
            username=user.get("username"),
        )

        if not self.policy.permits(identity):
            logger.warning(
                "Rejected %s: role %r not in %s",
                identity.username,
                user.get("user_type"),
                sorted(role.value for role in self.policy.allowed_roles or ()),
            )
            raise AuthDenied(PERMISSION_DENIED)

        return identity


def require_role(*roles: Role | str) -> AuthorizationGate:
    """Build a gate admitting only the given roles."""
    return AuthorizationGate(AccessPolicy.for_roles(*roles))


def require_authenticated() -> AuthorizationGate:
    """Build a gate admitting any authenticated caller."""
    return AuthorizationGate(AccessPolicy.any_role())


# Policies are evaluated once, at import/registration time
AnyIdentity = Annotated[Identity, Depends(require_authenticated())]
AdminIdentity = Annotated[Identity, Depends(require_role(Role.ADMIN))]
