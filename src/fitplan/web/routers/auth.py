"""Login, identity and plan listing routes."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from ...errors import GENERIC_ERROR_MESSAGE
from ..security import issue_token, require_user, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _parse_login(payload: Any) -> LoginRequest | None:
    try:
        return LoginRequest.model_validate(payload)
    except ValidationError:
        return None


@router.post("/login")
async def login(request: Request, payload: Any = Body(None)):
    """Issue a bearer token for a known email address.

    The password is only checked when REQUIRE_PASSWORD is enabled.
    """
    settings = request.app.state.settings
    users = request.app.state.users

    body = _parse_login(payload)
    if body is None or not body.email or not body.password:
        return _error(400, "All fields are required")

    try:
        user = await users.get_by_email(body.email)
        if user is None:
            return _error(400, "User not found")

        if settings.require_password:
            if not verify_password(body.password, user.password_hash):
                return _error(400, "Invalid credentials")
        else:
            logger.warning("Password check skipped for %s (REQUIRE_PASSWORD is off)", user.email)

        token = issue_token(user.id, settings.jwt_secret, settings.token_expiry_hours)
    except Exception:
        logger.exception("Error while logging in")
        return _error(500, GENERIC_ERROR_MESSAGE)

    return {"success": True, "user": user.to_dict(), "token": token}


@router.get("/me")
async def get_me(request: Request, claims: dict = Depends(require_user)):
    """Return the authenticated user without the password field."""
    users = request.app.state.users
    try:
        user = await users.get(claims["id"])
    except Exception:
        logger.exception("Error loading current user")
        return _error(500, GENERIC_ERROR_MESSAGE)

    if user is None:
        return _error(404, "User not found")

    return {"success": True, "user": user.to_dict(include_password=False)}


@router.post("/plans")
async def list_plans(
    request: Request,
    claims: dict = Depends(require_user),
    user_id: str | None = Query(None, alias="userId"),
    body: dict | None = Body(None),
):
    """List the authenticated user's plans, newest first.

    A ``userId`` in the query or body is accepted only when it names the
    token's own user.
    """
    requested = user_id or (body or {}).get("userId")
    if requested is not None and str(requested) != claims["id"]:
        return _error(400, "Invalid userId")

    plans = request.app.state.plans
    try:
        user_plans = await plans.list_by_user(claims["id"])
    except Exception:
        logger.exception("Error listing plans")
        return _error(500, GENERIC_ERROR_MESSAGE)

    return {"success": True, "plans": [p.to_dict() for p in user_plans]}


@router.post("/logout")
async def logout():
    """Tokens are stateless; the client discards its copy."""
    return {"success": True, "message": "Logged out successfully"}
