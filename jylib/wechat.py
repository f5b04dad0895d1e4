"""Fetching an access token from the WeChat API."""

from __future__ import annotations

from dataclasses import dataclass

import requests

TOKEN_URL = "https://api.weixin.qq.com/cgi-bin/token"
_TIMEOUT = 10


class WechatError(Exception):
    """A request to the WeChat API failed."""


@dataclass
class AccessToken:
    access_token: str = ""
    expires_in: int = 0


def get_access_token(app_id: str, app_secret: str) -> AccessToken:
    """Request a client-credential access token for ``app_id``."""
    params = {"grant_type": "client_credential", "appid": app_id, "secret": app_secret}
    try:
        response = requests.get(TOKEN_URL, params=params, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise WechatError(f"http get error: {exc}") from exc
    try:
        body = response.json()
    except ValueError as exc:
        raise WechatError(f"json decode error: {exc}") from exc
    if not isinstance(body, dict):
        raise WechatError("json decode error: expected an object")

    token = body.get("access_token")
    expires = body.get("expires_in")
    if token is not None and not isinstance(token, str):
        raise WechatError("json decode error: access_token is not a string")
    if expires is not None and (isinstance(expires, bool) or not isinstance(expires, int)):
        raise WechatError("json decode error: expires_in is not an integer")
    return AccessToken(access_token=token or "", expires_in=expires or 0)