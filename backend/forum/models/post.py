"""Post ORM - read-only projection in this service.

Invariants:
    - Always belongs to a Member (member_id FK)
    - date_created is timezone-aware; listing orders by it descending

Design Decisions:
    - votes, comments and member_posted_by loaded with selectin: the listing
      always returns the full graph, so lazy loads would only add round trips
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.db.base import Base


class Post(Base):
    """Post entity - a member's submission with its votes and comments."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False,
    )
    post_type: Mapped[str] = mapped_column(String(20), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    member_posted_by: Mapped["Member"] = relationship(
        "Member", back_populates="posts", lazy="selectin",
    )
    votes: Mapped[list["Vote"]] = relationship(
        "Vote", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
    )
