"""Hardball Application Package — news feed API with whitelist-gated credentials.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
