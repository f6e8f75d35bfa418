"""User Schemas - Pydantic models for user payloads and public user data.

Invariants:
    - UserInput requires username, email, firstName, lastName as strings
    - Unknown fields in UserInput are ignored (never reach the store)
    - UserResponse has no password field

Design Decisions:
    - populate_by_name: services construct models with snake_case names,
      clients speak camelCase
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserInput(BaseModel):
    """Create/update payload - full replacement of the mutable user fields."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    username: str
    email: str
    first_name: str
    last_name: str


class UserResponse(BaseModel):
    """Public user projection - password stripped."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    email: str
    username: str
    first_name: str
    last_name: str


def serialize_user(user) -> dict:
    return UserResponse.model_validate(user).model_dump(mode="json", by_alias=True)
