"""Request and response types of the Zelos vehicle-dispatch API."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any


class HttpMethod(str, enum.Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ZelosError(Exception):
    """An error reported by the API in its response body."""

    def __init__(self, code: int, message: str):
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"zelo {self.code} {self.message}"


@dataclass(frozen=True)
class _ListOf:
    item: Any


def _field(key: str, kind: Any, default: Any = None):
    metadata = {"json": key, "kind": kind}
    if isinstance(kind, _ListOf):
        return field(default_factory=list, metadata=metadata)
    return field(default=default, metadata=metadata)


def _str(key: str):
    return _field(key, str, "")


def _int(key: str):
    return _field(key, int, 0)


def _float(key: str):
    return _field(key, float, 0.0)


def _bool(key: str):
    return _field(key, bool, False)


def _convert(key: str, value: Any, kind: Any) -> Any:
    if kind is bool:
        if not isinstance(value, bool):
            raise TypeError(f"field {key!r}: expected a boolean")
        return value
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
    if isinstance(kind, _ListOf):
        if not isinstance(value, list):
            raise TypeError(f"field {key!r}: expected an array")
        return [None if item is None else _convert(key, item, kind.item) for item in value]
    if not isinstance(value, Mapping):
        raise TypeError(f"field {key!r}: expected an object")
    return kind.from_dict(value)


def _decode(cls: type, data: Mapping[str, Any], skip: frozenset[str] = frozenset()) -> dict:
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__}: expected an object")
    values = {}
    for spec in fields(cls):
        if spec.name in skip or "json" not in spec.metadata:
            continue
        key = spec.metadata["json"]
        value = data.get(key)
        if value is not None:
            values[spec.name] = _convert(key, value, spec.metadata["kind"])
    return values


def _encode_value(value: Any) -> Any:
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _encode(obj: Any) -> dict[str, Any]:
    """Encode fields that carry a JSON key, leaving out empty values."""
    result: dict[str, Any] = {}
    for spec in fields(obj):
        if "json" not in spec.metadata:
            continue
        value = getattr(obj, spec.name)
        if value:
            result[spec.metadata["json"]] = _encode_value(value)
    return result


@dataclass
class Status:
    """The status part every response carries."""

    success: bool = _bool("success")
    error_code: int = _int("errorCode")
    message: str = _str("message")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Status:
        return cls(**_decode(cls, data))


@dataclass
class AppIdKey:
    app_id: str = _str("appId")
    app_key: str = _str("appKey")

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class Auth:
    """A cached access token and the moment it stops being used."""

    id: int
    token: str
    expired_at: datetime


@dataclass
class Org:
    id: int = _int("id")
    name: str = _str("name")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Org:
        return cls(**_decode(cls, data))


@dataclass
class Station:
    id: int = _int("id")
    name: str = _str("name")
    lon_wgs84: float = _float("lon")
    lat_wgs84: float = _float("lat")
    lon_gcj02: float = _float("gcj02Lon")
    lat_gcj02: float = _float("gcj02Lat")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Station:
        return cls(**_decode(cls, data))


@dataclass
class Stop:
    id: int = _int("id")
    name: str = _str("name")
    station_id: int = _int("stationId")
    station_name: str = _str("stationName")
    lon_wgs84: float = _float("lon")
    lat_wgs84: float = _float("lat")
    lon_gcj02: float = _float("gcj02Lon")
    lat_gcj02: float = _float("gcj02Lat")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stop:
        return cls(**_decode(cls, data))


@dataclass
class Goal:
    stop_id: int = _int("stopId")
    stop_name: str = _str("stopName")
    goal_index: int = _int("goalIndex")
    arrival_datetime: str = _str("arrivalDatetime")
    departure_datetime: str = _str("departureDatetime")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Goal:
        return cls(**_decode(cls, data))


@dataclass
class Vehicle:
    id: int = _int("id")
    name: str = _str("name")
    number: str = _str("number")
    vin: str = _str("vin")
    station_id: int = _int("stationId")
    station_name: str = _str("stationName")
    business_status: str = _str("businessStatus")
    business_status_name: str = _str("businessStatusName")
    model: str = _str("model")
    box_volume: float = _float("boxVolume")
    box_size: str = _str("boxSize")
    weight: float = _float("weight")
    vehicle_size: str = _str("vehicleSize")
    no_load_endurance: float = _float("noLoadEndurance")
    full_load_endurance: float = _float("fullLoadEndurance")
    max_speed: float = _float("maxSpeed")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Vehicle:
        return cls(**_decode(cls, data))


@dataclass
class Dispatch:
    vehicle_id: int = _int("vehicleId")
    vehicle_name: str = _str("vehicleName")
    vehicle_number: str = _str("vehicleNumber")
    vehicle_business_status: str = _str("vehicleBusinessStatus")
    vehicle_business_status_name: str = _str("vehicleBusinessStatusName")
    dispatch_id: int = _int("dispatchId")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Dispatch:
        return cls(**_decode(cls, data))


@dataclass
class Page:
    """One page of a paginated list response."""

    total: int = _int("total")
    items: list = field(default_factory=list)
    page_num: int = _int("pageNum")
    page_size: int = _int("pageSize")
    size: int = _int("size")
    start_row: int = _int("startRow")
    end_row: int = _int("endRow")
    pages: int = _int("pages")
    pre_page: int = _int("prePage")
    next_page: int = _int("nextPage")
    is_first_page: bool = _bool("isFirstPage")
    is_last_page: bool = _bool("isLastPage")
    has_previous_page: bool = _bool("hasPreviousPage")
    has_next_page: bool = _bool("hasNextPage")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], item_type: type) -> Page:
        values = _decode(cls, data, skip=frozenset({"items"}))
        raw = data.get("list")
        if raw is not None:
            values["items"] = _convert("list", raw, _ListOf(item_type))
        return cls(**values)


@dataclass
class OrgListRequest:
    page_no: int = 0
    page_size: int = 0


@dataclass
class StationListRequest:
    org_id: int = 0
    page_no: int = 0
    page_size: int = 0


@dataclass
class VehicleListRequest:
    station_id: int = 0
    page_no: int = 0
    page_size: int = 0


@dataclass
class StopListRequest:
    station_id: int = 0
    page_no: int = 0
    page_size: int = 0


@dataclass
class VehicleDetail(Vehicle):
    """A vehicle with its position, power and current dispatch."""

    stops: list = _field("stops", _ListOf(Stop))
    lon_wgs84: float = _float("lon")
    lat_wgs84: float = _float("lat")
    lon_gcj02: float = _float("gcj02Lon")
    lat_gcj02: float = _float("gcj02Lat")
    online: bool = _bool("online")
    battery_charging: bool = _bool("batteryCharging")
    battery_power: float = _float("batteryPower")
    dispatch_id: int = _int("dispatchId")
    current_goal_index: int = _int("currentGoalIndex")
    goals: list = _field("goals", _ListOf(Goal))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VehicleDetail:
        return cls(**_decode(cls, data))


@dataclass
class AddDispatchRequest:
    vehicle_name: str = _str("vehicleName")
    from_stop_id: int = _int("fromStopId")
    to_stop_ids: list = _field("toStopIds", _ListOf(int))
    speed_limit: float = _float("speedLimit")

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class AddStopsRequest:
    name: str = _str("name")
    lon_wgs84: float = _float("lon")
    lat_wgs84: float = _float("lat")
    heading: float = _float("heading")
    station_id: int = _int("stationId")
    comment: str = _str("comment")
    user_id: int = _int("userId")
    user_name: str = _str("userName")

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class UpdateStopsRequest:
    id: int = _int("id")
    name: str = _str("name")
    lon_wgs84: float = _float("lon")
    lat_wgs84: float = _float("lat")
    heading: float = _float("heading")
    station_id: int = _int("stationId")
    comment: str = _str("comment")
    user_id: int = _int("userId")
    user_name: str = _str("userName")

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class DeleteStopsRequest:
    id: int = _int("id")
    user_id: int = _int("userId")
    user_name: str = _str("userName")

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)