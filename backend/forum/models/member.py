"""Member ORM - forum participation record, created alongside its User.

Invariants:
    - user_id is unique: at most one Member per User
    - Created in the same transaction as the owning User
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.db.base import Base


class Member(Base):
    """Member entity - author of posts, votes and comments."""
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="member", lazy="selectin",
    )
    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="member_posted_by",
    )
