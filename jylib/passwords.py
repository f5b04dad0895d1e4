"""bcrypt password hashing."""

import bcrypt

_COST = 10
_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password`` with cost 10."""
    raw = password.encode("utf-8")
    if len(raw) > _MAX_BYTES:
        raise ValueError(f"password length exceeds {_MAX_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=_COST)).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    """True if ``password`` matches the bcrypt ``hashed`` value."""
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:_MAX_BYTES], hashed.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False