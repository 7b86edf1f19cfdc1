"""Domain Types — verifies record predicates, enums and secret-free reprs."""

from uuid import uuid4

from hardball.core.domain_types import (
    IdentityId, LoginRecord, LoginResult, LoginStatus,
    RegistrationRecord, RegistrationResult, RegistrationStatus,
)


def test_login_record_registered_only_when_all_fields_present():
    assert LoginRecord("s", "t", "h").is_registered
    assert not LoginRecord(None, None, None).is_registered
    assert not LoginRecord("s", None, "h").is_registered


def test_registration_record_registered_when_token_present():
    iid = IdentityId(uuid4())
    assert RegistrationRecord(iid, "tok").is_registered
    assert not RegistrationRecord(iid, None).is_registered


def test_registration_status_values():
    assert {s.value for s in RegistrationStatus} == {
        "created", "conflict", "forbidden", "error",
    }


def test_login_status_values():
    assert {s.value for s in LoginStatus} == {"ok", "unauthorized"}


def test_registration_result_carries_no_secret():
    result = RegistrationResult(RegistrationStatus.CREATED, "bob")
    assert set(vars(result)) == {"status", "username"}


def test_login_result_repr_hides_token():
    result = LoginResult(LoginStatus.OK, "bob", "deadbeef" * 8)
    assert "deadbeef" not in repr(result)
    assert "bob" in repr(result)
