"""Input Validation - turns loosely-typed request data into typed values.

Invariants:
    - A key counts as missing only when absent; falsy values ("", 0, False, None) are present
    - parse_user_input either returns a UserInput or raises UserValidationError
      listing every missing/invalid field
    - Query parameter checks raise ClientError, never ValidationError

Design Decisions:
    - Missing-key pass runs before Pydantic: absence and bad values are reported
      with the same {field, message} shape but absence is decided by key presence alone
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from forum.core.domain_types import PostSort
from forum.core.errors import ClientError, UserValidationError
from forum.schemas.user import UserInput

REQUIRED_USER_KEYS = ("username", "email", "firstName", "lastName")


def find_missing_keys(data: Mapping[str, Any], keys: Iterable[str]) -> list[str]:
    """Return every key absent from data, in the order given."""
    return [key for key in keys if key not in data]


def is_key_missed(data: Mapping[str, Any], keys: Iterable[str]) -> bool:
    return any(key not in data for key in keys)


def parse_user_input(data: Mapping[str, Any]) -> UserInput:
    """Validate a user payload for create/update."""
    if is_key_missed(data, REQUIRED_USER_KEYS):
        raise UserValidationError([
            {"field": key, "message": "Field required"}
            for key in find_missing_keys(data, REQUIRED_USER_KEYS)
        ])
    try:
        return UserInput.model_validate(data)
    except PydanticValidationError as e:
        raise UserValidationError([
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
            }
            for err in e.errors()
        ]) from e


def require_single_value(values: list[str] | None, name: str) -> str:
    """A query parameter that must appear exactly once."""
    if not values or len(values) != 1:
        raise ClientError(f"Query parameter '{name}' must be a single string")
    return values[0]


def parse_post_sort(value: str | None) -> PostSort:
    try:
        return PostSort(value)
    except ValueError:
        raise ClientError(f"Unsupported sort: {value!r}") from None
