"""Login endpoints."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from ..security import create_token, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


@router.post("/login")
async def login(body: LoginRequest, request: Request):
    """Exchange a username and password for a session token."""
    logger.info(f"Login attempt: {body.username!r}")

    if not body.username or not body.password:
        raise HTTPException(status_code=400, detail="Username and password required")

    user = request.app.state.users.verify_credentials(body.username, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return {
        "success": True,
        "message": "Login successful",
        "token": create_token(user, request.app.state.config),
        "user": user,
    }


@router.get("/me")
async def me(user: Dict[str, Any] = Depends(get_current_user)):
    """The user the token belongs to."""
    return {"success": True, "user": user}
