"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns exactly one Member; Member owns posts, votes and comments

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from forum.models.user import User  # noqa: F401
from forum.models.member import Member  # noqa: F401
from forum.models.post import Post  # noqa: F401
from forum.models.vote import Vote  # noqa: F401
from forum.models.comment import Comment  # noqa: F401
