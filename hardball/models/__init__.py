"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Identity rows are created only by provisioning, never by registration

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from hardball.models.identity import Identity  # noqa: F401
from hardball.models.post import Post  # noqa: F401
