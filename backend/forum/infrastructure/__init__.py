"""Infrastructure Layer - database session management and logging setup.

Invariants:
    - Everything here does IO; core/ never imports from this package
"""
