from urllib.parse import parse_qs, parse_qsl, urlsplit

from jylib.wxapp import qrcode_admin, qrcode_url, qrcode_user


def test_qrcode_url_without_path():
    assert (
        qrcode_url("wx123", "", None)
        == "https://open.weixin.qq.com/sns/getexpappinfo?appid=wx123#wechat-redirect"
    )


def test_qrcode_url_path_carries_query():
    url = qrcode_url("wx123", "pages/index", {"a": "1", "b": "two"})
    parts = urlsplit(url)
    assert parts.scheme == "https"
    assert parts.netloc == "open.weixin.qq.com"
    assert parts.path == "/sns/getexpappinfo"
    assert parts.fragment == "wechat-redirect"
    params = parse_qs(parts.query)
    assert params["appid"] == ["wx123"]
    assert params["path"] == ["pages/index?a=1&b=two"]


def test_qrcode_url_path_without_query():
    params = parse_qs(urlsplit(qrcode_url("wx1", "pages/home", {})).query)
    assert params["path"] == ["pages/home"]


def test_qrcode_url_query_ignored_without_path():
    params = parse_qs(urlsplit(qrcode_url("wx1", "", {"a": "1"})).query)
    assert "path" not in params
    assert params["appid"] == ["wx1"]


def test_qrcode_user_sorted_query():
    parts = urlsplit(qrcode_user("api.example.com", {"b": "2", "a": "1 x"}))
    assert parts.netloc == "api.example.com"
    assert parts.path == "/qrcode/user"
    assert parse_qsl(parts.query) == [("a", "1 x"), ("b", "2")]


def test_qrcode_admin_without_query():
    assert qrcode_admin("api.example.com", None) == "https://api.example.com/qrcode/admin"


def test_qrcode_admin_with_query():
    parts = urlsplit(qrcode_admin("api.example.com", {"id": "7"}))
    assert parts.path == "/qrcode/admin"
    assert parse_qsl(parts.query) == [("id", "7")]