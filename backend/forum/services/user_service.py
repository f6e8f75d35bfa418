"""User Service - create, update and look up user accounts.

Invariants:
    - Conflict checks run in order: username, then email
    - A new User and its Member are committed together or not at all
    - Update conflict checks exclude the user being updated
    - Update is a conditional write on (id, previously-read username);
      zero affected rows raises UpdatePreconditionFailedError
    - Returned users are ORM objects; routes strip the password when serializing

Design Decisions:
    - Self-exclusion on update: resubmitting one's own unchanged username/email
      is not a conflict
    - Optimistic precondition over SELECT ... FOR UPDATE: one round trip, and
      SQLite has no row locks
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.errors import (
    EmailAlreadyInUseError,
    UpdatePreconditionFailedError,
    UserNotFoundError,
    UsernameAlreadyTakenError,
)
from forum.core.random_string import generate_random_string
from forum.models.member import Member
from forum.models.user import User
from forum.schemas.user import UserInput
from forum.services.error_boundary import translate_unhandled

logger = logging.getLogger(__name__)


class UserService:
    """User account operations over a single request-scoped session."""

    def __init__(self, db: AsyncSession, password_length: int = 10):
        self.db = db
        self.password_length = password_length

    async def create_user(self, user_input: UserInput) -> User:
        """Create a user and its member with a generated placeholder password."""
        with translate_unhandled("create user"):
            await self._check_conflicts(user_input)

            user = User(
                username=user_input.username,
                email=user_input.email,
                first_name=user_input.first_name,
                last_name=user_input.last_name,
                password=generate_random_string(self.password_length),
            )
            user.member = Member()
            self.db.add(user)
            await self.db.commit()

            logger.info(
                f"User '{user.username}' created", extra={"user_id": user.id},
            )
            return user

    async def update_user(self, user_id: int, user_input: UserInput) -> User:
        """Replace the mutable fields of an existing user."""
        with translate_unhandled("update user"):
            user = await self._get_user(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))

            await self._check_conflicts(user_input, exclude_id=user_id)

            result = await self.db.execute(
                update(User)
                .where(User.id == user_id)
                .where(User.username == user.username)
                .values(
                    username=user_input.username,
                    email=user_input.email,
                    first_name=user_input.first_name,
                    last_name=user_input.last_name,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await self.db.rollback()
                raise UpdatePreconditionFailedError(user_id)

            await self.db.commit()
            await self.db.refresh(user)

            logger.info(
                f"User {user_id} updated", extra={"user_id": user_id},
            )
            return user

    async def get_user_by_email(self, email: str) -> User:
        with translate_unhandled("find user by email"):
            user = await self._find_one(User.email == email)
            if user is None:
                raise UserNotFoundError(email)
            return user

    # ─── Queries ─────────────────────────────────────────────────

    async def _check_conflicts(
        self, user_input: UserInput, exclude_id: int | None = None,
    ) -> None:
        if await self._find_one(User.username == user_input.username, exclude_id):
            raise UsernameAlreadyTakenError(user_input.username)
        if await self._find_one(User.email == user_input.email, exclude_id):
            raise EmailAlreadyInUseError(user_input.email)

    async def _get_user(self, user_id: int) -> User | None:
        return await self._find_one(User.id == user_id)

    async def _find_one(self, condition, exclude_id: int | None = None) -> User | None:
        query = select(User).where(condition)
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalars().first()
