# jylib

A collection of small building blocks for backend services.

## Installation

```
pip install jylib
```

To run the test suite, install the test extra:

```
pip install "jylib[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `jylib.cipher` | DES-CBC with PKCS#5 padding (the key doubles as the IV), and chunked RSA PKCS#1 v1.5 encryption with a public or a private key, as base64 text |
| `jylib.errors` | `Code` and `CodedError`: exceptions that carry a numeric code; `register_code_names` gives codes printable names |
| `jylib.naming` | `server_name` and `server_endpoint` for discovery names such as `discovery:///prod.app` |
| `jylib.tokens` | HS256 JWT `encode` / `decode` of any JSON-serialisable payload; failures raise `TokenError` |
| `jylib.passwords` | bcrypt `hash_password` (cost 10) / `verify_password` |
| `jylib.snowflake` | `Worker` and `snow_id()` for 64-bit snowflake ids |
| `jylib.filesize` | `format_file_size`, for example `1536` gives `"1.50 KB"` |
| `jylib.endpoint` | `new_endpoint`, `parse_endpoint` and `scheme` for endpoint URLs |
| `jylib.timerange` | `current_day`, `current_week` (Monday to Monday), `current_month`, `current_year` in local time |
| `jylib.lonlat` | WGS-84 / GCJ-02 / BD-09 conversion, `FullLonLat`, and haversine `gps_distance` in metres |
| `jylib.host` | `extract_host_port`, `port` of a bound socket, and `extract`, which picks a local address when the host is unspecified |
| `jylib.wxapp` | Mini-program QR code URLs: `qrcode_url`, `qrcode_user`, `qrcode_admin` |
| `jylib.wechat` | `get_access_token` for a WeChat app; failures raise `WechatError` |
| `jylib.wxpay_types` | `WxPayData`, `WxRefundData` and `ProfitReceiver` records with `from_dict` / `to_dict` |
| `jylib.zelos_types`, `jylib.zelos` | Records and `ZelosClient`, an HTTP client for the Zelos vehicle-dispatch API |

## Examples

```python
from datetime import datetime, timedelta, timezone

from jylib import tokens
from jylib.snowflake import snow_id
from jylib.filesize import format_file_size

key = "secret"
signed = tokens.encode({"user_id": 7}, key, datetime.now(timezone.utc) + timedelta(hours=1))
assert tokens.decode(signed, key) == {"user_id": 7}

print(snow_id())
print(format_file_size(1536))  # 1.50 KB
```

Coded errors:

```python
from jylib.errors import new_error, register_code_names

register_code_names({5: "NOT_FOUND"})
err = new_error(5, "not found")
print(err)            # [5]not found
print(str(err.code))  # NOT_FOUND
assert err.is_code(5)
```

The Zelos client caches its access token and renews it a minute before it expires:

```python
from jylib.zelos import ZelosClient
from jylib.zelos_types import StopListRequest

with ZelosClient("https://zelos.example.com", "app-id", "placeholder") as client:
    total, stops = client.stop_list(StopListRequest(station_id=1, page_no=1, page_size=20))
```

A response that reports failure raises `ZelosError`; a body that cannot be decoded raises `ValueError`.

The worker id used by `snow_id()` is read from the `SNOW_WORK_ID` environment variable. The value used is that number plus one.

## What it does not do

There is no per-key mutex helper, and the package has no command-line interface: everything is used as a library.