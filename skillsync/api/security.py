"""
Bearer token authentication

Tokens are HS256 JWTs issued by the SkillSync auth service.
The user ID is read from the "id" claim, falling back to "sub".
"""

import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from skillsync.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def check_jwt_secret(settings: Settings) -> bool:
    """
    Warn when tokens are verified with the built-in development key.

    Returns:
        True if a configured secret is in use
    """
    if settings.uses_default_jwt_secret:
        logger.warning(
            "JWT_SECRET_KEY is not set; bearer tokens are verified with the built-in "
            "development key. Set JWT_SECRET_KEY before deploying."
        )
        return False
    return True


def create_access_token(
    user_id: str,
    settings: Settings | None = None,
    expires_delta: timedelta = timedelta(days=30),
) -> str:
    """Create a signed access token for user_id."""
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_user_id(token: str, settings: Settings) -> str:
    """
    Validate a token and return the user ID it carries.

    Raises:
        JWTError: If the token is invalid, expired or has no user ID
    """
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    user_id = payload.get("id") or payload.get("sub")
    if not user_id:
        raise JWTError("Token has no user id")
    return str(user_id)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency resolving the caller's user ID from the Authorization header."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_user_id(credentials.credentials, settings)
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, token failed",
            headers={"WWW-Authenticate": "Bearer"},
        )
