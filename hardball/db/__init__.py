"""Database Infrastructure — SQLAlchemy Base shared by all ORM models.

Invariants:
    - All sessions are async (AsyncSession)
"""
