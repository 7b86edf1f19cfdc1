"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies)
    - Missing required fields surface as 400 VALIDATION_ERROR via the global handler
"""
