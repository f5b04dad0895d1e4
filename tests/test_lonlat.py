import pytest

from jylib.lonlat import (
    Coord,
    FullLonLat,
    bd09_to_full,
    bd09_to_gcj02,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    gps_distance,
    wgs84_to_full,
    wgs84_to_gcj02,
)

BEIJING = (116.404, 39.915)


def test_outside_china_is_unchanged():
    assert wgs84_to_gcj02(-122.4, 37.7) == (-122.4, 37.7)
    assert gcj02_to_wgs84(-122.4, 37.7) == (-122.4, 37.7)


def test_inside_china_is_shifted_slightly():
    lon, lat = wgs84_to_gcj02(*BEIJING)
    assert 0 < abs(lon - BEIJING[0]) < 0.01
    assert 0 < abs(lat - BEIJING[1]) < 0.01


def test_wgs_gcj_round_trip():
    lon, lat = gcj02_to_wgs84(*wgs84_to_gcj02(*BEIJING))
    assert lon == pytest.approx(BEIJING[0], abs=1e-4)
    assert lat == pytest.approx(BEIJING[1], abs=1e-4)


def test_gcj_bd_round_trip():
    lon, lat = bd09_to_gcj02(*gcj02_to_bd09(*BEIJING))
    assert lon == pytest.approx(BEIJING[0], abs=1e-5)
    assert lat == pytest.approx(BEIJING[1], abs=1e-5)


def test_wgs84_to_full_is_consistent():
    full = wgs84_to_full(*BEIJING)
    assert (full.wgs_lon, full.wgs_lat) == BEIJING
    assert (full.gcj_lon, full.gcj_lat) == wgs84_to_gcj02(*BEIJING)
    assert (full.bd_lon, full.bd_lat) == gcj02_to_bd09(full.gcj_lon, full.gcj_lat)


def test_bd09_to_full_inverts_wgs84_to_full():
    full = wgs84_to_full(*BEIJING)
    back = bd09_to_full(full.bd_lon, full.bd_lat)
    assert (back.bd_lon, back.bd_lat) == (full.bd_lon, full.bd_lat)
    assert back.wgs_lon == pytest.approx(BEIJING[0], abs=1e-4)
    assert back.wgs_lat == pytest.approx(BEIJING[1], abs=1e-4)


def test_dataclasses_hold_values():
    assert Coord(1.5, 2.5).lat == 2.5
    assert FullLonLat(wgs_lon=3.0).gcj_lon == 0.0


def test_distance_same_point_is_zero():
    assert gps_distance(39.9, 116.4, 39.9, 116.4) == 0


def test_distance_is_symmetric():
    forward = gps_distance(39.9, 116.4, 31.2, 121.5)
    backward = gps_distance(31.2, 121.5, 39.9, 116.4)
    assert forward == pytest.approx(backward)
    assert forward > 0


def test_distance_pole_to_pole():
    assert gps_distance(90, 0, -90, 0) == pytest.approx(20015086.796, rel=1e-6)