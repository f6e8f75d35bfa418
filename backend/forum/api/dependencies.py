"""Route Dependencies - build request-scoped services from the injected session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import Settings, get_settings
from forum.infrastructure.database import get_db
from forum.services.post_service import PostService
from forum.services.user_service import UserService


def get_user_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(db, password_length=settings.password_length)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)
