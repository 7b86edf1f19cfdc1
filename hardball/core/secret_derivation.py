"""Secret Derivation — salted, iterated password hashing and random secrets.

Invariants:
    - derive() is deterministic: equal (secret, salt) always yields equal output
    - derive() output is lowercase hex, 2 * DERIVED_KEY_BYTES chars long
    - generate_secret_hex() draws from the OS CSPRNG (secrets module)
    - hashes_match() runs in time independent of where the inputs differ

Design Decisions:
    - PBKDF2-HMAC-SHA256, 100k iterations, 64-byte key (format of `auth.pass_hash`)
    - Salt is hashed as its hex text (UTF-8 bytes), not decoded to raw bytes
"""

import hashlib
import hmac
import secrets

HASH_ALGORITHM = "sha256"
DEFAULT_ITERATIONS = 100_000
DERIVED_KEY_BYTES = 64
DEFAULT_SECRET_BYTES = 32


def derive(secret: str, salt: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Derive a hex password hash from a plaintext secret and a salt."""
    key = hashlib.pbkdf2_hmac(
        HASH_ALGORITHM,
        secret.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
        dklen=DERIVED_KEY_BYTES,
    )
    return key.hex()


def generate_secret_hex(nbytes: int = DEFAULT_SECRET_BYTES) -> str:
    """Random lowercase hex string from nbytes of CSPRNG output (salts, tokens)."""
    return secrets.token_bytes(nbytes).hex()


def hashes_match(candidate: str, stored: str) -> bool:
    """Timing-safe comparison of two hex digests."""
    return hmac.compare_digest(
        candidate.encode("utf-8"), stored.encode("utf-8"),
    )
