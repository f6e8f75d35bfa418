"""Random String Generator - placeholder secrets for new accounts.

Invariants:
    - Output length equals the requested length (non-positive → empty string)
    - Every character comes from ALPHABET (88 characters)

Design Decisions:
    - random.choices over secrets: the value is a placeholder, never shown to the caller
"""

import random
import string

ALPHABET = (
    string.ascii_lowercase
    + string.ascii_uppercase
    + string.digits
    + "!@#$%^&*()_+-=[]{}|;:,.<>?"
)


def generate_random_string(length: int) -> str:
    """Draw `length` characters uniformly, with replacement, from ALPHABET."""
    if length <= 0:
        return ""
    return "".join(random.choices(ALPHABET, k=length))
