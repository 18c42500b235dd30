import pytest

from rediscmd.geo import (
    geo_add,
    geo_dist,
    geo_hash,
    geo_pos,
    geo_radius,
    geo_radius_by_member,
)


def _args(command):
    return list(command.args_iter())


class _Options:
    def __init__(self, *parts):
        self._parts = parts

    def redis_args(self):
        return [part.encode("ascii") for part in self._parts]


def test_geo_add_with_string_tuple():
    command = geo_add("my_gis", ("13.361389", "38.115556", "Palermo"))
    assert _args(command) == [b"GEOADD", b"my_gis", b"13.361389", b"38.115556", b"Palermo"]


def test_geo_add_many_points():
    command = geo_add(
        "my_gis",
        [("13.361389", "38.115556", "Palermo"), ("15.087269", "37.502669", "Catania")],
    )
    args = _args(command)
    assert len(args) == 2 + 6
    assert args[-1] == b"Catania"
    assert args[4] == b"Palermo"


def test_geo_dist():
    command = geo_dist("my_gis", "Palermo", "Catania", "km")
    assert _args(command) == [b"GEODIST", b"my_gis", b"Palermo", b"Catania", b"km"]


def test_geo_dist_wire_bytes_start():
    packed = geo_dist("my_gis", "Palermo", "Catania", "m").get_packed_command()
    assert packed.startswith(b"*5\r\n$7\r\nGEODIST\r\n")


def test_geo_hash_single_and_many():
    assert _args(geo_hash("my_gis", "Palermo")) == [b"GEOHASH", b"my_gis", b"Palermo"]
    assert _args(geo_hash("my_gis", ["Palermo", "Catania"])) == [
        b"GEOHASH",
        b"my_gis",
        b"Palermo",
        b"Catania",
    ]


def test_geo_pos():
    assert _args(geo_pos("my_gis", ["Palermo", "Catania"])) == [
        b"GEOPOS",
        b"my_gis",
        b"Palermo",
        b"Catania",
    ]


def test_geo_radius_order_of_arguments():
    options = _Options("WITHDIST", "ASC")
    args = _args(geo_radius("my_gis", 15.5, 37.25, 51.5, "km", options))
    assert args[0] == b"GEORADIUS"
    assert args[1] == b"my_gis"
    assert args[2:5] == [b"15.5", b"37.25", b"51.5"]
    assert args[5:] == [b"km", b"WITHDIST", b"ASC"]


def test_geo_radius_without_options():
    args = _args(geo_radius("my_gis", 1, 2, 3, "m", None))
    assert args == [b"GEORADIUS", b"my_gis", b"1", b"2", b"3", b"m"]


def test_geo_radius_by_member():
    options = _Options("WITHCOORD")
    args = _args(geo_radius_by_member("my_gis", "Palermo", 100, "km", options))
    assert args == [b"GEORADIUSBYMEMBER", b"my_gis", b"Palermo", b"100", b"km", b"WITHCOORD"]


def test_unsupported_member_type_raises():
    with pytest.raises(TypeError):
        geo_add("my_gis", object())