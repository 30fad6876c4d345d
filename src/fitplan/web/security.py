"""Bearer token issuance and verification."""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..errors import AuthError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

bearer_scheme = HTTPBearer(auto_error=False)


def issue_token(user_id: str, secret: str | None, expiry_hours: float = 1) -> str:
    """Sign a token carrying only the user identifier."""
    if not secret:
        raise RuntimeError("JSON_WEB_SECRET is not configured")
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "iat": now,
        "exp": now + timedelta(hours=expiry_hours),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_token(token: str, secret: str | None) -> dict:
    """Verify a token's signature and expiry and return its claims."""
    if not secret:
        raise AuthError("Invalid or expired token")
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.PyJWTError as e:
        logger.info("Token rejected: %s", e)
        raise AuthError("Invalid or expired token") from e
    if not claims.get("id"):
        raise AuthError("Invalid or expired token")
    return claims


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        return False


# Dependency
async def require_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    """Reject the request unless it carries a valid bearer token.

    The decoded claims are attached to ``request.state.user`` and returned.
    """
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        raise AuthError("No token provided")

    claims = decode_token(credentials.credentials, request.app.state.settings.jwt_secret)
    request.state.user = claims
    return claims
