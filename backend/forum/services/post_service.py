"""Post Service - read-only post listing.

Invariants:
    - Posts come back with votes, member_posted_by.user and comments loaded
    - PostSort.RECENT orders by date_created descending
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.domain_types import PostSort
from forum.models.post import Post
from forum.services.error_boundary import translate_unhandled

logger = logging.getLogger(__name__)

_ORDERINGS = {
    PostSort.RECENT: Post.date_created.desc(),
}


class PostService:
    """Post read operations over a single request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_posts(self, sort: PostSort) -> list[Post]:
        with translate_unhandled("list posts"):
            result = await self.db.execute(
                select(Post).order_by(_ORDERINGS[sort], Post.id.desc()),
            )
            posts = list(result.scalars().all())
            logger.debug(f"Listed {len(posts)} posts (sort={sort.value})")
            return posts
