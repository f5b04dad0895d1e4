"""URLs for mini-program QR codes."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode, urlunsplit

_QRCODE_HOST = "open.weixin.qq.com"
_QRCODE_PATH = "/sns/getexpappinfo"
_QRCODE_FRAGMENT = "wechat-redirect"


def _https_url(host: str, path: str, params: Mapping[str, str], fragment: str = "") -> str:
    query = urlencode(sorted(params.items())) if params else ""
    return urlunsplit(("https", host, path, query, fragment))


def qrcode_url(appid: str, path: str, query: Mapping[str, str] | None = None) -> str:
    """URL that opens the mini-program ``appid`` at ``path`` with ``query``."""
    params = {"appid": appid}
    if path:
        if query:
            path += "?" + "&".join(f"{key}={value}" for key, value in query.items())
        params["path"] = path
    return _https_url(_QRCODE_HOST, _QRCODE_PATH, params, _QRCODE_FRAGMENT)


def qrcode_user(api_domain: str, query: Mapping[str, str] | None = None) -> str:
    """URL of the user QR code endpoint on ``api_domain``."""
    return _https_url(api_domain, "/qrcode/user", dict(query or {}))


def qrcode_admin(api_domain: str, query: Mapping[str, str] | None = None) -> str:
    """URL of the admin QR code endpoint on ``api_domain``."""
    return _https_url(api_domain, "/qrcode/admin", dict(query or {}))