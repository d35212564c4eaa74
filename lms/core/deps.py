# /lms/core/deps.py

"""
FastAPI dependencies for the auth gate and the role gate.

`get_auth_context` validates the bearer credential and resolves it to an
`AuthContext`. `require_roles(...)` builds a dependency that additionally
checks the caller's role against a fixed set of `Role` members. Routers
declare their requirement once, e.g.

    ctx: AuthContext = Depends(require_roles(Role.TEACHER))

and pass `ctx` explicitly into the service layer.
"""

import logging
from typing import Optional

from fastapi import Depends, Header

from . import errors, security
from ..models.user_model import AuthContext, Role

logger = logging.getLogger(__name__)

_BEARER_HEADERS = {"WWW-Authenticate": "Bearer"}


def get_auth_context(authorization: Optional[str] = Header(None)) -> AuthContext:
    if not authorization:
        raise errors.to_http_exception(errors.AuthError("Access denied. No token provided."), headers=_BEARER_HEADERS)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise errors.to_http_exception(errors.AuthError("Invalid token format. Use Bearer TOKEN"), headers=_BEARER_HEADERS)

    try:
        claims = security.decode_access_token(parts[1])
        user_id = claims.get("sub")
        if not user_id:
            raise errors.AuthError("Invalid token")
        try:
            role = Role(claims.get("role"))
        except ValueError:
            raise errors.AuthError("Invalid token")
    except errors.AuthError as e:
        raise errors.to_http_exception(e, headers=_BEARER_HEADERS)

    return AuthContext(user_id=str(user_id), role=role)


def require_roles(*roles: Role):
    """Returns a dependency that admits only callers whose role is in `roles`."""
    allowed = frozenset(roles)
    names = " or ".join(r.value for r in roles)

    def _role_gate(ctx: AuthContext = Depends(get_auth_context)) -> AuthContext:
        if ctx.role not in allowed:
            logger.info("Role gate denied %s (%s); requires %s", ctx.user_id, ctx.role.value, names)
            raise errors.to_http_exception(errors.ForbiddenError(f"Access denied. Only {names} can access this."))
        return ctx

    return _role_gate


require_student = require_roles(Role.STUDENT)
require_teacher = require_roles(Role.TEACHER)
require_admin = require_roles(Role.ADMIN)
