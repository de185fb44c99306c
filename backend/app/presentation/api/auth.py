"""JWT bearer authorization — FastAPI dependencies that guard routes by role.

Tokens are issued by another service; this module only verifies them. The
``sub`` claim carries the user's email and ``role`` its role name.
"""

import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from app.config import get_settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    """The authenticated caller."""

    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == get_settings().admin_role


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_token(token: str) -> Principal:
    """Verify the signature and expiry of ``token`` and extract the principal.

    Raises:
        HTTPException: 401 if the token is expired, malformed or lacks claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Expired token attempted")
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token attempted: %s", e)
        raise _unauthorized("Invalid authentication token")

    email = payload.get("sub")
    role = payload.get("role")
    if not email or not role:
        raise _unauthorized("Invalid authentication token")
    return Principal(email=email, role=role)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Principal:
    """FastAPI dependency — the caller behind the bearer token, or 401."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    return decode_token(credentials.credentials)


def require_role(*allowed_roles: str):
    """Dependency factory for role-based access control.

    Example:
        >>> @router.post("", dependencies=[Depends(require_role("Admin"))])
    """

    async def role_checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role not in allowed_roles:
            logger.warning(
                "Insufficient permissions for %s (role=%s, required=%s)",
                principal.email, principal.role, allowed_roles,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required role: {', '.join(allowed_roles)}",
            )
        return principal

    return role_checker


def require_admin():
    return require_role(get_settings().admin_role)
