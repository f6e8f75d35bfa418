"""Post Routes - post listing.

Invariants:
    - sort must appear exactly once and be exactly "recent"; anything else is a ClientError
"""

from fastapi import APIRouter, Depends, Query

from forum.api.dependencies import get_post_service
from forum.core.envelope import success
from forum.core.validation import parse_post_sort, require_single_value
from forum.schemas.post import serialize_posts
from forum.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("")
async def list_posts(
    sort: list[str] | None = Query(None),
    service: PostService = Depends(get_post_service),
):
    """List all posts with votes, author and comments."""
    posts = await service.list_posts(
        parse_post_sort(require_single_value(sort, "sort")),
    )
    return success({"posts": serialize_posts(posts)})
