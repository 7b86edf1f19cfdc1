"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Credential logic lives in services/credentials.py, never in a route
"""
