import socket
from collections import namedtuple
from types import SimpleNamespace
from unittest import mock

import pytest

from jylib.host import extract, extract_host_port, port

_Addr = namedtuple("_Addr", "family address netmask broadcast ptp")


def _addr(family, address):
    return _Addr(family, address, None, None, None)


@pytest.fixture
def tcp_listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen()
    yield sock
    sock.close()


def test_extract_host_port_ipv4():
    assert extract_host_port("127.0.0.1:8080") == ("127.0.0.1", 8080)


def test_extract_host_port_ipv6():
    assert extract_host_port("[::1]:443") == ("::1", 443)


@pytest.mark.parametrize(
    "addr", ["localhost", "a:b:c", "host:70000", "host:-1", "host:", "[::1", "[::1]"]
)
def test_extract_host_port_errors(addr):
    with pytest.raises(ValueError):
        extract_host_port(addr)


def test_port_of_bound_socket(tcp_listener):
    assert port(tcp_listener) == tcp_listener.getsockname()[1]


def test_port_of_non_ip_listener():
    fake = SimpleNamespace(family=None, getsockname=lambda: "/tmp/sock")
    assert port(fake) is None


def test_extract_specific_address():
    assert extract("127.0.0.1:8000", None) == "127.0.0.1:8000"


def test_extract_uses_listener_port(tcp_listener):
    bound = tcp_listener.getsockname()[1]
    assert extract("10.1.2.3:1", tcp_listener) == f"10.1.2.3:{bound}"


def test_extract_bad_address_without_listener():
    with pytest.raises(ValueError):
        extract("no-port-here", None)


def test_extract_listener_without_port():
    fake = SimpleNamespace(family=None, getsockname=lambda: "/tmp/sock")
    with pytest.raises(ValueError, match="failed to extract port"):
        extract("127.0.0.1:80", fake)


def _patch_interfaces(addrs, up=True):
    stats = {name: SimpleNamespace(isup=up) for name in addrs}
    return (
        mock.patch("psutil.net_if_addrs", return_value=addrs),
        mock.patch("psutil.net_if_stats", return_value=stats),
    )


def test_extract_unspecified_picks_interface_address():
    addrs = {
        "test-if0": [
            _addr(socket.AF_INET, "127.0.0.1"),
            _addr(socket.AF_INET, "192.168.1.10"),
        ]
    }
    patch_addrs, patch_stats = _patch_interfaces(addrs)
    with patch_addrs, patch_stats:
        assert extract("0.0.0.0:8000", None) == "192.168.1.10:8000"


def test_extract_skips_link_local_ipv6():
    addrs = {
        "test-if0": [
            _addr(socket.AF_INET6, "fe80::1%test-if0"),
            _addr(socket.AF_INET6, "2001:db8::1"),
        ]
    }
    patch_addrs, patch_stats = _patch_interfaces(addrs)
    with patch_addrs, patch_stats:
        assert extract("[::]:8000", None) == "[2001:db8::1]:8000"


def test_extract_ignores_down_interfaces():
    addrs = {"test-if0": [_addr(socket.AF_INET, "192.168.1.10")]}
    patch_addrs, patch_stats = _patch_interfaces(addrs, up=False)
    with patch_addrs, patch_stats:
        assert extract(":8000", None) == ""