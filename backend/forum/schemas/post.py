"""Post Schemas - read projections for the post listing.

Invariants:
    - memberPostedBy.user is a UserResponse (password stripped)
    - Datetimes serialize as ISO 8601 strings
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from forum.schemas.user import UserResponse

_READ_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, from_attributes=True,
)


class VoteResponse(BaseModel):
    model_config = _READ_CONFIG

    id: int
    post_id: int
    member_id: int
    vote_type: str


class CommentResponse(BaseModel):
    model_config = _READ_CONFIG

    id: int
    post_id: int
    member_id: int
    text: str
    parent_comment_id: int | None = None
    date_created: datetime


class MemberResponse(BaseModel):
    model_config = _READ_CONFIG

    id: int
    user_id: int
    user: UserResponse


class PostResponse(BaseModel):
    """Post with its votes, author and comments."""
    model_config = _READ_CONFIG

    id: int
    member_id: int
    post_type: str
    title: str
    content: str
    date_created: datetime
    votes: list[VoteResponse]
    member_posted_by: MemberResponse
    comments: list[CommentResponse]


def serialize_posts(posts) -> list[dict]:
    return [
        PostResponse.model_validate(p).model_dump(mode="json", by_alias=True)
        for p in posts
    ]
