"""Infrastructure Layer — database access, credential store, and cross-cutting concerns.

Invariants:
    - Infrastructure implements the protocols declared in core/repository_protocols.py
    - All SQLAlchemy failures mapped to TransientStoreError (core/errors.py)
"""
