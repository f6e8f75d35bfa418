"""User Routes - create, update and look up accounts.

Invariants:
    - Bodies are validated by core.validation.parse_user_input before any query
    - Responses never include a password
    - POST → 201, PATCH/GET → 200 on success
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, status

from forum.api.dependencies import get_user_service
from forum.core.envelope import success
from forum.core.validation import parse_user_input, require_single_value
from forum.schemas.user import serialize_user
from forum.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

# Largest value a BIGINT primary key can hold
MAX_USER_ID = 2**63 - 1


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """Create a user account (and its member)."""
    user_input = parse_user_input(body)
    user = await service.create_user(user_input)
    return success(serialize_user(user))


@router.patch("/{user_id}")
async def update_user(
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    body: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """Replace username, email, firstName and lastName of a user."""
    user_input = parse_user_input(body)
    user = await service.update_user(user_id, user_input)
    return success(serialize_user(user))


@router.get("")
async def get_user_by_email(
    email: list[str] | None = Query(None),
    service: UserService = Depends(get_user_service),
):
    """Look up a user by exact email."""
    user = await service.get_user_by_email(require_single_value(email, "email"))
    return success(serialize_user(user))
