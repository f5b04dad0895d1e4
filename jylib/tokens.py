"""HS256 JSON Web Tokens that carry an arbitrary JSON payload."""

from __future__ import annotations

import base64
import binascii
import json
import math
from datetime import datetime
from typing import Any

import jwt

_ALGORITHMS = ["HS256", "HS384", "HS512"]


class TokenError(ValueError):
    """A token could not be created or verified."""


def encode(data: Any, key: bytes | str, expired_at: datetime) -> str:
    """Sign ``data`` into a token that expires at ``expired_at``."""
    try:
        raw = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise TokenError(f"json encode error: {exc}") from exc
    claims = {
        "payload": base64.b64encode(raw).decode("ascii"),
        "exp": math.floor(expired_at.timestamp()),
    }
    return jwt.encode(claims, key, algorithm="HS256")


def decode(token: str, key: bytes | str) -> Any:
    """Verify ``token`` and return the payload it carries."""
    try:
        claims = jwt.decode(token, key, algorithms=_ALGORITHMS)
    except jwt.PyJWTError as exc:
        raise TokenError(f"token parse error: {exc}") from exc
    payload = claims.get("payload")
    if payload is None:
        raise TokenError("token carries no payload")
    if not isinstance(payload, str):
        raise TokenError("token payload has the wrong type")
    try:
        raw = base64.b64decode(payload, validate=True)
        return json.loads(raw)
    except (binascii.Error, ValueError) as exc:
        raise TokenError(f"json decode error: {exc}") from exc