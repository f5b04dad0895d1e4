"""DES-CBC and chunked RSA helpers."""

from __future__ import annotations

import base64

from Crypto.Cipher import DES, PKCS1_v1_5
from Crypto.PublicKey import RSA

_PKCS1_OVERHEAD = 11


def pkcs5_padding(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` to a multiple of ``block_size`` (always adds at least one byte)."""
    padding = block_size - len(data) % block_size
    return bytes(data) + bytes([padding]) * padding


def pkcs5_unpadding(data: bytes) -> bytes:
    """Strip the padding whose length is given by the last byte."""
    if not data:
        raise ValueError("cannot unpad empty data")
    unpadding = data[-1]
    if unpadding > len(data):
        raise ValueError("padding length exceeds data length")
    return bytes(data[: len(data) - unpadding])


def _des_cipher(key: bytes):
    key = bytes(key)
    if len(key) != DES.key_size:
        raise ValueError(f"DES key must be {DES.key_size} bytes, got {len(key)}")
    # The key doubles as the initialisation vector.
    return DES.new(key, DES.MODE_CBC, iv=key)


def des_cbc_encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt with DES in CBC mode, PKCS#5 padding and the key as IV."""
    cipher = _des_cipher(key)
    return cipher.encrypt(pkcs5_padding(data, DES.block_size))


def des_cbc_decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt data produced by :func:`des_cbc_encrypt`."""
    cipher = _des_cipher(key)
    if len(data) % DES.block_size:
        raise ValueError("ciphertext is not a whole number of blocks")
    return pkcs5_unpadding(cipher.decrypt(bytes(data)))


def _load_key(pem: str, *, private: bool) -> RSA.RsaKey:
    try:
        key = RSA.import_key(pem)
    except (ValueError, IndexError, TypeError) as exc:
        raise ValueError("invalid RSA key") from exc
    if private and not key.has_private():
        raise ValueError("a private RSA key is required")
    return key


def _blocks(data: bytes, size: int):
    for start in range(0, len(data), size):
        yield data[start : start + size]


def _decode_cipher_blocks(data: str, size: int) -> list[bytes]:
    raw = base64.b64decode(data, validate=True)
    if len(raw) % size:
        raise ValueError("ciphertext length does not match the key size")
    return list(_blocks(raw, size))


def public_encrypt(data: str, public_key: str) -> str:
    """Encrypt with a public key (PKCS#1 v1.5), returning base64 text."""
    key = _load_key(public_key, private=False)
    cipher = PKCS1_v1_5.new(key)
    step = key.size_in_bytes() - _PKCS1_OVERHEAD
    raw = data.encode("utf-8")
    encrypted = b"".join(cipher.encrypt(chunk) for chunk in _blocks(raw, step))
    return base64.b64encode(encrypted).decode("ascii")


def private_decrypt(data: str, private_key: str) -> str:
    """Decrypt base64 text produced by :func:`public_encrypt`."""
    key = _load_key(private_key, private=True)
    cipher = PKCS1_v1_5.new(key)
    sentinel = object()
    parts = []
    for block in _decode_cipher_blocks(data, key.size_in_bytes()):
        plain = cipher.decrypt(block, sentinel)
        if plain is sentinel:
            raise ValueError("RSA decryption failed")
        parts.append(plain)
    return b"".join(parts).decode("utf-8")


def private_encrypt(data: str, private_key: str) -> str:
    """Encrypt with a private key using PKCS#1 type 1 padding, returning base64 text."""
    key = _load_key(private_key, private=True)
    size = key.size_in_bytes()
    out = []
    for chunk in _blocks(data.encode("utf-8"), size - _PKCS1_OVERHEAD):
        padded = b"\x00\x01" + b"\xff" * (size - 3 - len(chunk)) + b"\x00" + chunk
        value = pow(int.from_bytes(padded, "big"), key.d, key.n)
        out.append(value.to_bytes(size, "big"))
    return base64.b64encode(b"".join(out)).decode("ascii")


def public_decrypt(data: str, public_key: str) -> str:
    """Decrypt base64 text produced by :func:`private_encrypt`."""
    key = _load_key(public_key, private=False)
    size = key.size_in_bytes()
    parts = []
    for block in _decode_cipher_blocks(data, size):
        value = int.from_bytes(block, "big")
        if value >= key.n:
            raise ValueError("RSA decryption failed")
        padded = pow(value, key.e, key.n).to_bytes(size, "big")
        if padded[:2] != b"\x00\x01":
            raise ValueError("RSA decryption failed")
        separator = padded.find(b"\x00", 2)
        if separator < 10 or padded[2:separator] != b"\xff" * (separator - 2):
            raise ValueError("RSA decryption failed")
        parts.append(padded[separator + 1 :])
    return b"".join(parts).decode("utf-8")