"""Credential Parsing — splits a presented `username:token` string.

Invariants:
    - Split happens at the FIRST colon only; the remainder is the token
    - Missing delimiter, empty username or empty token -> None (never raises)
"""

CREDENTIAL_DELIMITER = ":"


def parse_credential(raw: str | None) -> tuple[str, str] | None:
    """Return (username, token), or None when the credential is malformed."""
    if not raw or not isinstance(raw, str):
        return None
    username, sep, token = raw.partition(CREDENTIAL_DELIMITER)
    if not sep or not username or not token:
        return None
    return username, token
