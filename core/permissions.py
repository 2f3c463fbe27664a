# app/core/permissions.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError

from core.security import decode_token
from schemas.user import AuthenticatedIdentity

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


async def get_current_user(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedIdentity:
    """Resolve the bearer token to an identity. No database round trip."""

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers=_BEARER_CHALLENGE,
        )

    try:
        payload = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise JWTError("not an access token")
        return AuthenticatedIdentity(
            id=payload["id"],
            username=payload["username"],
            role=payload["role"],
        )
    except (JWTError, KeyError, ValidationError) as e:
        logger.warning(f"Invalid token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers=_BEARER_CHALLENGE,
        )


def require_roles(*roles_allowed):
    allowed = {getattr(r, "value", r) for r in roles_allowed}

    def wrapper(user: AuthenticatedIdentity = Depends(get_current_user)) -> AuthenticatedIdentity:
        if user.role.value not in allowed:
            logger.warning(f"User {user.id} with role {user.role.value} denied")
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return user
    return wrapper
