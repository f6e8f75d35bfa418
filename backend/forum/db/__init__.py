"""Database Infrastructure - SQLAlchemy declarative Base.

Invariants:
    - All models inherit from Base (db/base.py)
"""
