"""Endpoint URL helpers."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import SplitResult, urlsplit


def new_endpoint(scheme: str, host: str) -> SplitResult:
    """Build an endpoint URL from a scheme and host."""
    return SplitResult(scheme, host, "", "", "")


def parse_endpoint(endpoints: Iterable[str], scheme: str) -> str:
    """Return the host of the first endpoint with ``scheme``, or an empty string."""
    for endpoint in endpoints:
        parts = urlsplit(endpoint)
        if parts.scheme == scheme:
            return parts.netloc.rpartition("@")[2]
    return ""


def scheme(scheme: str, is_secure: bool) -> str:
    """Append "s" to the scheme when secure, e.g. http -> https."""
    return scheme + "s" if is_secure else scheme