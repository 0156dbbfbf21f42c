"""Bearer token issuing and verification"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from creativesnap.core.config import settings
from creativesnap.core.errors import Forbidden, Unauthorized

logger = logging.getLogger(__name__)

# auto_error is off so a missing header reports the same 401 body as a bad token
security = HTTPBearer(auto_error=False)


def create_access_token(claims: dict, expires_hours: Optional[int] = None) -> str:
    """Sign ``claims`` with the shared secret; the token has a fixed lifetime, no refresh"""
    issued_at = datetime.now(timezone.utc)
    if expires_hours is None:
        expires_hours = settings.ACCESS_TOKEN_EXPIRE_HOURS
    expire = issued_at + timedelta(hours=expires_hours)
    payload = {**claims, "iat": issued_at, "exp": expire}
    return jwt.encode(payload, settings.ACCESS_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.ACCESS_KEY, algorithms=[settings.JWT_ALGORITHM])


def verify_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """Guard for protected routes: returns the decoded claims"""
    if credentials is None:
        raise Unauthorized()
    try:
        decoded = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as exc:
        logger.warning(f"Rejected bearer token: {exc}")
        raise Unauthorized() from exc

    request.state.decoded = decoded
    return decoded


def ensure_same_email(decoded: dict, email: str) -> None:
    """Email-scoped routes only serve the token's own records"""
    if decoded.get("email") != email:
        raise Forbidden()
