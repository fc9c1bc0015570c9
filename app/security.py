"""
Campus Records API - Role Guard
================================

What:  Resolves the caller's role from a bearer token and gates endpoints.
How:   `get_current_role` verifies `Authorization: Bearer <JWT>` with PyJWT
       and maps its `roles` claim onto the Role enum. `require_role(...)`
       builds a dependency that raises ForbiddenError for any other role.
Who:   Attached to every /api router endpoint via `dependencies=[...]`.

Role resolution:
    roles contains ADMIN  → Role.ADMIN
    roles contains USER   → Role.USER
    anything else         → Role.ANONYMOUS
    (missing, malformed, expired or badly signed tokens are ANONYMOUS)

Tokens are issued by the hosting login flow, which is outside this service.
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterable, Optional

import jwt
from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings
from app.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    ANONYMOUS = "ANONYMOUS"
    USER = "USER"
    ADMIN = "ADMIN"


# auto_error=False: a missing header must resolve to ANONYMOUS, not a
# framework-generated 401/403.
bearer_scheme = HTTPBearer(auto_error=False)


def _normalize(name: Any) -> str:
    value = str(name).upper()
    if value.startswith("ROLE_"):
        value = value[len("ROLE_"):]
    return value


def role_from_claims(roles: Optional[Iterable[Any]]) -> Role:
    """Maps a token's `roles` claim onto the highest matching Role."""
    if not roles or isinstance(roles, str):
        roles = [roles] if roles else []
    names = {_normalize(r) for r in roles}
    if Role.ADMIN.value in names:
        return Role.ADMIN
    if Role.USER.value in names:
        return Role.USER
    return Role.ANONYMOUS


def decode_token(token: str) -> dict:
    """
    Decode and verify a bearer token.

    Raises jwt.InvalidTokenError (or a subclass) on any failure.
    """
    if not settings.jwt_secret:
        raise jwt.InvalidTokenError("JWT secret is not configured")
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def get_current_role(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> Role:
    """FastAPI dependency returning the caller's Role."""
    if credentials is None:
        role = Role.ANONYMOUS
    else:
        try:
            payload = decode_token(credentials.credentials)
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired bearer token on %s", request.url.path)
            role = Role.ANONYMOUS
        except jwt.InvalidTokenError as e:
            logger.info("Rejected invalid bearer token on %s: %s", request.url.path, e)
            role = Role.ANONYMOUS
        else:
            role = role_from_claims(payload.get("roles"))
            request.state.subject = payload.get("sub")
    request.state.role = role
    return role


def require_role(*allowed: Role) -> Callable[..., Role]:
    """
    Build a dependency that only lets `allowed` roles through.

    Example:
        router = APIRouter(prefix="/api/articles")

        @router.post("/post", dependencies=[Depends(require_role(Role.ADMIN))])
        async def create_article(...): ...
    """
    allowed_set = frozenset(allowed)

    def guard(request: Request, role: Role = Depends(get_current_role)) -> Role:
        if role not in allowed_set:
            logger.warning(
                "Access denied: %s %s requires %s, caller is %s",
                request.method,
                request.url.path,
                sorted(r.value for r in allowed_set),
                role.value,
            )
            raise ForbiddenError(context={"role": role.value, "path": request.url.path})
        return role

    guard.allowed_roles = allowed_set
    return guard


require_user = require_role(Role.USER, Role.ADMIN)
require_admin = require_role(Role.ADMIN)


def resolve_role(request: Request) -> Role:
    """Role of the caller, read straight from the Authorization header."""
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    credentials = None
    if scheme.lower() == "bearer" and token.strip():
        credentials = HTTPAuthorizationCredentials(scheme=scheme, credentials=token.strip())
    return get_current_role(request, credentials)


def enforce_route_guards(request: Request) -> None:
    """
    Run the role guards of the matched route outside dependency resolution.

    FastAPI decodes a JSON body before solving `dependencies=[...]`, so a
    malformed PUT body fails before the guard runs. The validation handler
    calls this first; it raises ForbiddenError when a guard rejects the caller.
    """
    route = request.scope.get("route")
    guards = [
        dep.dependency
        for dep in getattr(route, "dependencies", ())
        if hasattr(dep.dependency, "allowed_roles")
    ]
    if not guards:
        return
    role = resolve_role(request)
    for guard in guards:
        guard(request, role)
