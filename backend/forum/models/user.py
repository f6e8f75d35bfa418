"""User ORM - identity record for a forum account.

Invariants:
    - username and email are each unique across all users (DB constraint)
    - password is system-generated and never serialized (see schemas/user.py)
    - never deleted by this service

Design Decisions:
    - Integer autoincrement id: path parameters are numeric
    - member relationship not eagerly loaded: only written at creation time
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.db.base import Base


class User(Base):
    """Account identity - one-to-one with Member."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    member: Mapped["Member"] = relationship(
        "Member", back_populates="user", uselist=False,
        cascade="all, delete-orphan",
    )
