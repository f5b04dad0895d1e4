"""Host and port helpers for announcing a service address."""

from __future__ import annotations

import ipaddress
import socket
import sys
from collections.abc import Iterator

import psutil

_UNSPECIFIED = {"0.0.0.0", "[::]", "::"}


def _split_host_port(addr: str) -> tuple[str, str]:
    """Split ``host:port`` or ``[host]:port`` into its parts."""
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0:
            raise ValueError(f"address {addr}: missing ']' in address")
        rest = addr[end + 1 :]
        if not rest:
            raise ValueError(f"address {addr}: missing port in address")
        if rest[0] != ":" or ":" in rest[1:]:
            if ":" in rest:
                raise ValueError(f"address {addr}: too many colons in address")
            raise ValueError(f"address {addr}: missing port in address")
        host, port = addr[1:end], rest[1:]
        if "[" in addr[1:] or "]" in addr[end + 1 :]:
            raise ValueError(f"address {addr}: unexpected bracket in address")
        return host, port
    colon = addr.rfind(":")
    if colon < 0:
        raise ValueError(f"address {addr}: missing port in address")
    host, port = addr[:colon], addr[colon + 1 :]
    if ":" in host:
        raise ValueError(f"address {addr}: too many colons in address")
    if "[" in addr or "]" in addr:
        raise ValueError(f"address {addr}: unexpected bracket in address")
    return host, port


def _join_host_port(host: str, port: str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def extract_host_port(addr: str) -> tuple[str, int]:
    """Split ``addr`` into a host and a port number between 0 and 65535."""
    host, port_text = _split_host_port(addr)
    if not (port_text.isascii() and port_text.isdigit()):
        raise ValueError(f"invalid port {port_text!r}")
    number = int(port_text)
    if number > 0xFFFF:
        raise ValueError(f"port {port_text} out of range")
    return host, number


def port(listener) -> int | None:
    """The port a TCP or UDP socket is bound to, or None for other sockets."""
    if getattr(listener, "family", None) not in (socket.AF_INET, socket.AF_INET6):
        return None
    address = listener.getsockname()
    if isinstance(address, tuple) and len(address) >= 2:
        return int(address[1])
    return None


def _is_valid_ip(ip: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    if ip.is_unspecified or ip.is_loopback or ip.is_multicast or ip.is_link_local:
        return False
    if isinstance(ip, ipaddress.IPv4Address) and int(ip) == 0xFFFFFFFF:
        return False
    return True


def _is_v4(ip: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    return ip.version == 4 or getattr(ip, "ipv4_mapped", None) is not None


def _format_ip(ip: ipaddress.IPv4Address | ipaddress.IPv6Address) -> str:
    mapped = getattr(ip, "ipv4_mapped", None)
    return str(mapped if mapped is not None else ip)


def _interfaces() -> Iterator[tuple[int, list]]:
    """Yield (index, addresses) for every interface that is up, by index."""
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()
    try:
        indexes = {name: index for index, name in socket.if_nameindex()}
    except (OSError, AttributeError):
        indexes = {}
    ordered = sorted(
        (indexes.get(name, 1_000_000 + position), name)
        for position, name in enumerate(addrs)
    )
    for index, name in ordered:
        stat = stats.get(name)
        if stat is None or not stat.isup:
            continue
        ips = []
        for entry in addrs[name]:
            if entry.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                ips.append(ipaddress.ip_address(entry.address.split("%", 1)[0]))
            except ValueError:
                continue
        yield index, ips


def extract(host_port: str, listener=None) -> str:
    """Return a reachable ``host:port``, picking a local address when unspecified."""
    try:
        addr, port_text = _split_host_port(host_port)
    except ValueError:
        if listener is None:
            raise
        addr, port_text = "", ""
    if listener is not None:
        bound = port(listener)
        if bound is None:
            raise ValueError(f"failed to extract port: {listener.getsockname()!r}")
        port_text = str(bound)
    if addr and addr not in _UNSPECIFIED:
        return _join_host_port(addr, port_text)

    min_index = sys.maxsize
    chosen: list = []
    for index, ips in _interfaces():
        if index >= min_index and chosen:
            continue
        for position, ip in enumerate(ips):
            if not _is_valid_ip(ip):
                continue
            min_index = index
            if position == 0:
                chosen = []
            chosen.append(ip)
            if _is_v4(ip):
                break
    if chosen:
        return _join_host_port(_format_ip(chosen[-1]), port_text)
    return ""