"""Domain Types: enums that replace raw string matching in services.

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


class PostSort(str, Enum):
    """Supported orderings for the post listing."""
    RECENT = "recent"
