"""Commands on hashes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from rediscmd.cmd import Cmd, cmd, is_float_number, is_single_arg


def hget(key: Any, field: Any) -> Cmd:
    """Get one field of a hash; several fields become an ``HMGET``."""
    return cmd("HGET" if is_single_arg(field) else "HMGET").arg(key).arg(field)


def hdel(key: Any, field: Any) -> Cmd:
    """Delete one or more fields from a hash."""
    return cmd("HDEL").arg(key).arg(field)


def hset(key: Any, field: Any, value: Any) -> Cmd:
    """Set a single field in a hash."""
    return cmd("HSET").arg(key).arg(field).arg(value)


def hset_nx(key: Any, field: Any, value: Any) -> Cmd:
    """Set a field in a hash only if it does not exist."""
    return cmd("HSETNX").arg(key).arg(field).arg(value)


def hset_multiple(key: Any, items: Any) -> Cmd:
    """Set several fields in a hash from ``(field, value)`` pairs."""
    return cmd("HMSET").arg(key).arg(items)


def hincr(key: Any, field: Any, delta: Any) -> Cmd:
    """Increment a hash field, using ``HINCRBYFLOAT`` for a float delta."""
    name = "HINCRBYFLOAT" if is_float_number(delta) else "HINCRBY"
    return cmd(name).arg(key).arg(field).arg(delta)


def hexists(key: Any, field: Any) -> Cmd:
    """Check whether a field exists in a hash."""
    return cmd("HEXISTS").arg(key).arg(field)


def hkeys(key: Any) -> Cmd:
    """Get all the field names of a hash."""
    return cmd("HKEYS").arg(key)


def hvals(key: Any) -> Cmd:
    """Get all the values of a hash."""
    return cmd("HVALS").arg(key)


def hgetall(key: Any) -> Cmd:
    """Get all fields and values of a hash."""
    return cmd("HGETALL").arg(key)


def hlen(key: Any) -> Cmd:
    """Get the number of fields in a hash."""
    return cmd("HLEN").arg(key)


def hscan(con: Any, key: Any) -> Iterator[Any]:
    """Iterate incrementally over the fields and values of a hash."""
    return cmd("HSCAN").arg(key).cursor_arg(0).iter(con)


def hscan_match(con: Any, key: Any, pattern: Any) -> Iterator[Any]:
    """Iterate incrementally over the hash fields matching a pattern."""
    return cmd("HSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern).iter(con)