import base64
from datetime import datetime, timedelta

import jwt
import pytest

from jylib.tokens import TokenError, decode, encode

KEY = "secret".encode()


def future():
    return datetime.now().replace(microsecond=0) + timedelta(hours=1)


@pytest.mark.parametrize("data", [{"uid": 7, "name": "张三"}, [1, 2, 3], "text", 42, None])
def test_round_trip(data):
    assert decode(encode(data, KEY, future()), KEY) == data


def test_payload_is_base64_of_compact_json():
    encoded = encode({"a": 1, "b": "x"}, KEY, future())
    claims = jwt.decode(encoded, options={"verify_signature": False})
    assert base64.b64decode(claims["payload"]) == b'{"a":1,"b":"x"}'


def test_exp_claim_is_expiry_seconds():
    expires = future()
    encoded = encode({}, KEY, expires)
    claims = jwt.decode(encoded, options={"verify_signature": False})
    assert claims["exp"] == int(expires.timestamp())


def test_header_algorithm_is_hs256():
    encoded = encode({}, KEY, future())
    assert jwt.get_unverified_header(encoded)["alg"] == "HS256"


def test_expired_token_raises():
    encoded = encode({"a": 1}, KEY, datetime.now() - timedelta(hours=1))
    with pytest.raises(TokenError):
        decode(encoded, KEY)


def test_wrong_key_raises():
    encoded = encode({"a": 1}, KEY, future())
    other_key = KEY[::-1]
    with pytest.raises(TokenError):
        decode(encoded, other_key)


def test_garbage_token_raises():
    with pytest.raises(TokenError):
        decode("token", KEY)


def test_token_without_payload_raises():
    encoded = jwt.encode({"exp": int(future().timestamp())}, KEY, algorithm="HS256")
    with pytest.raises(TokenError):
        decode(encoded, KEY)


def test_unserialisable_data_raises():
    with pytest.raises(TokenError):
        encode({"a": object()}, KEY, future())