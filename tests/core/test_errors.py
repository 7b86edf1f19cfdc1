"""Error Hierarchy — verifies status codes, categories and the REST envelope.

Tests:
    - Each credential error maps to its HTTP status
    - to_response() has the uniform shape
    - InvalidCredentialsError does not depend on why login failed
"""

import pytest

from hardball.core.errors import (
    AlreadyProvisionedError, AlreadyRegisteredError, ErrorCategory,
    ErrorContext, HardballError, InvalidCredentialsError, MalformedInputError,
    NotWhitelistedError, ResourceNotFoundError, TransientStoreError,
    UnauthorizedError,
)


@pytest.mark.parametrize(
    "error, status, code",
    [
        (NotWhitelistedError(), 403, "NOT_WHITELISTED"),
        (AlreadyRegisteredError(), 409, "ALREADY_REGISTERED"),
        (InvalidCredentialsError(), 401, "INVALID_CREDENTIALS"),
        (UnauthorizedError(), 401, "UNAUTHORIZED"),
        (MalformedInputError("bad", "title"), 400, "MALFORMED_INPUT"),
        (TransientStoreError("down", "commit"), 503, "TRANSIENT_STORE_ERROR"),
        (ResourceNotFoundError("Post", "7"), 404, "RESOURCE_NOT_FOUND"),
        (AlreadyProvisionedError("bob"), 409, "ALREADY_PROVISIONED"),
    ],
)
def test_error_status_and_code(error, status, code):
    assert isinstance(error, HardballError)
    assert error.http_status == status
    assert error.code == code


def test_to_response_envelope():
    body = NotWhitelistedError().to_response()
    assert set(body["error"]) == {
        "code", "message", "category", "severity", "timestamp",
    }
    assert body["error"]["category"] == ErrorCategory.AUTHORIZATION.value


def test_invalid_credentials_message_is_fixed():
    a = InvalidCredentialsError(ErrorContext(username="alice"))
    b = InvalidCredentialsError(ErrorContext(username="nobody"))
    assert a.message == b.message
    assert "alice" not in a.to_response()["error"]["message"]


def test_transient_store_error_keeps_operation():
    err = TransientStoreError("Connection or operational error", "execute")
    assert err.operation == "execute"
    assert err.category is ErrorCategory.DATABASE
