"""API Schemas - Pydantic models for request parsing and response shaping.

Invariants:
    - JSON field names are camelCase (alias_generator=to_camel)
    - No response schema exposes a password
"""
