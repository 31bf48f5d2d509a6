"""Session tokens and the FastAPI dependencies that check them."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from fastapi import Depends, Header, HTTPException, Request

from ..config import AppConfig
from ..errors import AuthenticationError

logger = logging.getLogger(__name__)


def create_token(user: Dict[str, Any], config: AppConfig) -> str:
    """Sign a session token for a user."""
    now = datetime.now(timezone.utc)
    payload = {
        'sub': str(user['id']),
        'username': user['username'],
        'role': user.get('role', 'officer'),
        'iat': now,
        'exp': now + timedelta(hours=config.token_expire_hours),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_token(token: str, config: AppConfig) -> Dict[str, Any]:
    """
    Verify a session token.

    Returns:
        The token payload

    Raises:
        AuthenticationError: If the token is malformed, forged or expired
    """
    try:
        return jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("Invalid token") from e


def get_current_user(
    request: Request,
    authorization: str | None = Header(None, alias="Authorization"),
) -> Dict[str, Any]:
    """Resolve the Bearer token to a user (without password hash)."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid token")

    config: AppConfig = request.app.state.config
    try:
        payload = decode_token(authorization.split(" ", 1)[1], config)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))

    user = request.app.state.users.get_user(payload.get('username'))
    if user is None:
        raise HTTPException(status_code=401, detail="User no longer exists")

    return {key: value for key, value in user.items() if key != 'password'}


def require_admin(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    if user.get('role') != 'admin':
        logger.info(f"Denied admin access to {user.get('username')!r}")
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
