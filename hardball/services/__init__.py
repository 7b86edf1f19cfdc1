"""Services Layer — credential workflows orchestrating core logic around store IO.

Invariants:
    - Services receive their store through constructor injection
    - Workflow outcomes are returned as values; only store failures raise
"""
