"""Geospatial commands."""

from __future__ import annotations

from typing import Any

from rediscmd.cmd import Cmd, cmd


def geo_add(key: Any, members: Any) -> Cmd:
    """Add ``(longitude, latitude, member)`` items to a geospatial index."""
    return cmd("GEOADD").arg(key).arg(members)


def geo_dist(key: Any, member1: Any, member2: Any, unit: Any) -> Cmd:
    """Return the distance between two members in the given unit."""
    return cmd("GEODIST").arg(key).arg(member1).arg(member2).arg(unit)


def geo_hash(key: Any, members: Any) -> Cmd:
    """Return the geohash strings of one or more members."""
    return cmd("GEOHASH").arg(key).arg(members)


def geo_pos(key: Any, members: Any) -> Cmd:
    """Return the ``(longitude, latitude)`` positions of one or more members."""
    return cmd("GEOPOS").arg(key).arg(members)


def geo_radius(
    key: Any,
    longitude: float,
    latitude: float,
    radius: float,
    unit: Any,
    options: Any,
) -> Cmd:
    """Return the members within ``radius`` of a point."""
    return (
        cmd("GEORADIUS")
        .arg(key)
        .arg(longitude)
        .arg(latitude)
        .arg(radius)
        .arg(unit)
        .arg(options)
    )


def geo_radius_by_member(key: Any, member: Any, radius: float, unit: Any, options: Any) -> Cmd:
    """Return the members within ``radius`` of another member, itself included."""
    return cmd("GEORADIUSBYMEMBER").arg(key).arg(member).arg(radius).arg(unit).arg(options)