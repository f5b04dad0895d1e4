"""Conversions between WGS-84, GCJ-02 and BD-09 coordinates, and distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

_X_PI = math.pi * 3000.0 / 180.0
_OFFSET = 0.00669342162296594323
_AXIS = 6378245.0
_EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coord:
    lon: float
    lat: float


@dataclass(frozen=True)
class FullLonLat:
    wgs_lon: float = 0.0
    wgs_lat: float = 0.0
    gcj_lon: float = 0.0
    gcj_lat: float = 0.0
    bd_lon: float = 0.0
    bd_lat: float = 0.0


def _out_of_china(lon: float, lat: float) -> bool:
    return not (72.004 < lon < 135.05 and 3.86 < lat < 53.55)


def _transform(lon: float, lat: float) -> tuple[float, float]:
    lonlat = lon * lat
    abs_x = math.sqrt(abs(lon))
    lon_pi, lat_pi = lon * math.pi, lat * math.pi
    d = 20.0 * math.sin(6.0 * lon_pi) + 20.0 * math.sin(2.0 * lon_pi)
    x = y = d
    x += 20.0 * math.sin(lat_pi) + 40.0 * math.sin(lat_pi / 3.0)
    y += 20.0 * math.sin(lon_pi) + 40.0 * math.sin(lon_pi / 3.0)
    x += 160.0 * math.sin(lat_pi / 12.0) + 320 * math.sin(lat_pi / 30.0)
    y += 150.0 * math.sin(lon_pi / 12.0) + 300.0 * math.sin(lon_pi / 30.0)
    x *= 2.0 / 3.0
    y *= 2.0 / 3.0
    x += -100.0 + 2.0 * lon + 3.0 * lat + 0.2 * lat * lat + 0.1 * lonlat + 0.2 * abs_x
    y += 300.0 + lon + 2.0 * lat + 0.1 * lon * lon + 0.1 * lonlat + 0.1 * abs_x
    return x, y


def _delta(lon: float, lat: float) -> tuple[float, float]:
    dlat, dlon = _transform(lon - 105.0, lat - 35.0)
    radlat = lat / 180.0 * math.pi
    magic = 1 - _OFFSET * math.sin(radlat) ** 2
    sqrtmagic = math.sqrt(magic)
    dlat = (dlat * 180.0) / ((_AXIS * (1 - _OFFSET)) / (magic * sqrtmagic) * math.pi)
    dlon = (dlon * 180.0) / (_AXIS / sqrtmagic * math.cos(radlat) * math.pi)
    return lon + dlon, lat + dlat


def wgs84_to_gcj02(lon: float, lat: float) -> tuple[float, float]:
    if _out_of_china(lon, lat):
        return lon, lat
    return _delta(lon, lat)


def gcj02_to_wgs84(lon: float, lat: float) -> tuple[float, float]:
    if _out_of_china(lon, lat):
        return lon, lat
    mg_lon, mg_lat = _delta(lon, lat)
    return lon * 2 - mg_lon, lat * 2 - mg_lat


def gcj02_to_bd09(lon: float, lat: float) -> tuple[float, float]:
    z = math.sqrt(lon * lon + lat * lat) + 0.00002 * math.sin(lat * _X_PI)
    theta = math.atan2(lat, lon) + 0.000003 * math.cos(lon * _X_PI)
    return z * math.cos(theta) + 0.0065, z * math.sin(theta) + 0.006


def bd09_to_gcj02(lon: float, lat: float) -> tuple[float, float]:
    x = lon - 0.0065
    y = lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * _X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * _X_PI)
    return z * math.cos(theta), z * math.sin(theta)


def wgs84_to_full(lon: float, lat: float) -> FullLonLat:
    gcj_lon, gcj_lat = wgs84_to_gcj02(lon, lat)
    bd_lon, bd_lat = gcj02_to_bd09(gcj_lon, gcj_lat)
    return FullLonLat(lon, lat, gcj_lon, gcj_lat, bd_lon, bd_lat)


def bd09_to_full(lon: float, lat: float) -> FullLonLat:
    gcj_lon, gcj_lat = bd09_to_gcj02(lon, lat)
    wgs_lon, wgs_lat = gcj02_to_wgs84(gcj_lon, gcj_lat)
    return FullLonLat(wgs_lon, wgs_lat, gcj_lon, gcj_lat, lon, lat)


def gps_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle (haversine) distance in metres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = math.radians(lng2) - math.radians(lng1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return c * _EARTH_RADIUS_KM * 1000