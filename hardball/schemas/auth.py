"""Auth Schemas — username/password bodies for register and login.

Invariants:
    - username and password are required, non-empty strings
    - Responses never include a password hash; only login returns the token
"""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Body of POST /api/auth/register and POST /api/auth/login."""
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=1024)


class RegisterResponse(BaseModel):
    user: str
    status: int


class LoginResponse(BaseModel):
    user: str
    status: int
    token: str
