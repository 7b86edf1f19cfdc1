"""Auth Routes — whitelist-gated registration and password login.

Invariants:
    - register: 201 on activation, 409 already registered, 403 not whitelisted,
      503 when the store transaction was rolled back
    - login: 200 with token, or 401 with one message for every failure cause
    - The token is returned only by a successful login, to its owner

Design Decisions:
    - Workflow outcomes are values; this module is the only place they become
      HTTP errors
"""

import logging

from fastapi import APIRouter, Depends, status

from hardball.api.dependencies import get_credential_service
from hardball.core.domain_types import LoginStatus, RegistrationStatus
from hardball.core.errors import (
    AlreadyRegisteredError, ErrorContext, InvalidCredentialsError,
    NotWhitelistedError, TransientStoreError,
)
from hardball.schemas.auth import (
    CredentialsRequest, LoginResponse, RegisterResponse,
)
from hardball.services.credentials import CredentialService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: CredentialsRequest,
    service: CredentialService = Depends(get_credential_service),
):
    """Activate a whitelisted username with a password."""
    result = await service.register(body.username, body.password)
    context = ErrorContext(username=body.username)
    match result.status:
        case RegistrationStatus.CREATED:
            return RegisterResponse(user=result.username, status=201)
        case RegistrationStatus.CONFLICT:
            raise AlreadyRegisteredError(context)
        case RegistrationStatus.FORBIDDEN:
            raise NotWhitelistedError(context)
        case _:
            raise TransientStoreError("transaction rolled back", "register", context)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: CredentialsRequest,
    service: CredentialService = Depends(get_credential_service),
):
    """Exchange username and password for the account's bearer token."""
    result = await service.login(body.username, body.password)
    if result.status is not LoginStatus.OK:
        raise InvalidCredentialsError(ErrorContext(username=body.username))
    return LoginResponse(user=result.username, status=200, token=result.token)
