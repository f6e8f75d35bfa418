"""Response Envelope - the fixed {error, data, success} wrapper for every response.

Invariants:
    - Exactly one of error/data is non-null
    - success is True iff data is populated
    - details only appears on failures that list offending fields
"""

from typing import Any


def success(data: Any) -> dict:
    return {"error": None, "data": data, "success": True}


def failure(code: str, details: list[dict] | None = None) -> dict:
    body: dict[str, Any] = {"error": code, "data": None, "success": False}
    if details:
        body["details"] = details
    return body
