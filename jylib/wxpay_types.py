"""Decrypted WeChat Pay notification payloads and profit-sharing receivers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any


def _str(key: str):
    return field(default="", metadata={"json": key, "type": str})


def _int(key: str):
    return field(default=0, metadata={"json": key, "type": int})


def _float(key: str):
    return field(default=0.0, metadata={"json": key, "type": float})


def _obj(key: str, cls: type):
    return field(default_factory=cls, metadata={"json": key, "type": cls})


def _convert(key: str, value: Any, kind: type) -> Any:
    if kind is str:
        if not isinstance(value, str):
            raise TypeError(f"field {key!r}: expected a string")
        return value
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"field {key!r}: expected an integer")
        return value
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"field {key!r}: expected a number")
        return float(value)
    if not isinstance(value, Mapping):
        raise TypeError(f"field {key!r}: expected an object")
    return kind.from_dict(value)


def _from_dict(cls: type, data: Mapping[str, Any]) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__}: expected an object")
    values = {}
    for spec in fields(cls):
        key = spec.metadata["json"]
        value = data.get(key)
        if value is not None:
            values[spec.name] = _convert(key, value, spec.metadata["type"])
    return cls(**values)


def _to_dict(obj: Any) -> dict[str, Any]:
    """Encode fields by their JSON keys; empty scalars are omitted, nested objects kept."""
    result: dict[str, Any] = {}
    for spec in fields(obj):
        value = getattr(obj, spec.name)
        if is_dataclass(value):
            result[spec.metadata["json"]] = value.to_dict()
        elif value:
            result[spec.metadata["json"]] = value
    return result


@dataclass
class Payer:
    sp_openid: str = _str("sp_openid")
    sub_openid: str = _str("sub_openid")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Payer:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass
class PayAmount:
    total: int = _int("total")
    payer_total: int = _int("payer_total")
    currency: str = _str("currency")
    payer_currency: str = _str("payer_currency")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PayAmount:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass
class WxPayData:
    """A successful payment notification."""

    sp_mchid: str = _str("sp_mchid")
    sp_appid: str = _str("sp_appid")
    sub_mchid: str = _str("sub_mchid")
    sub_appid: str = _str("sub_appid")
    out_trade_no: str = _str("out_trade_no")
    transaction_id: str = _str("transaction_id")
    trade_type: str = _str("trade_type")
    trade_state: str = _str("trade_state")
    trade_state_desc: str = _str("trade_state_desc")
    bank_type: str = _str("bank_type")
    attach: str = _str("attach")
    success_time: str = _str("success_time")
    payer: Payer = _obj("payer", Payer)
    amount: PayAmount = _obj("amount", PayAmount)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WxPayData:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass
class RefundAmount:
    payer_refund: int = _int("payer_refund")
    payer_total: int = _int("payer_total")
    refund: int = _int("refund")
    total: int = _int("total")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RefundAmount:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass
class WxRefundData:
    """A refund notification."""

    sp_mchid: str = _str("sp_mchid")
    sub_mchid: str = _str("sub_mchid")
    transaction_id: str = _str("transaction_id")
    out_refund_no: str = _str("out_refund_no")
    out_trade_no: str = _str("out_trade_no")
    refund_id: str = _str("refund_id")
    refund_status: str = _str("refund_status")
    amount: RefundAmount = _obj("amount", RefundAmount)
    success_time: str = _str("success_time")
    user_received_account: str = _str("user_received_account")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WxRefundData:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass
class ProfitReceiver:
    """A profit-sharing receiver; type 1 is a merchant, 2 a person."""

    type: int = _int("type")
    account: str = _str("account")
    name: str = _str("name")
    sharing_ratio: float = _float("ratio")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfitReceiver:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)