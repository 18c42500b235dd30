"""Commands on keys and string values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from rediscmd.cmd import Cmd, cmd, is_float_number, is_single_arg


def get(key: Any) -> Cmd:
    """Get the value of a key; several keys become an ``MGET``."""
    return cmd("GET" if is_single_arg(key) else "MGET").arg(key)


def keys(pattern: Any) -> Cmd:
    """Get all keys matching a pattern."""
    return cmd("KEYS").arg(pattern)


def set(key: Any, value: Any) -> Cmd:  # noqa: A001
    """Set the string value of a key."""
    return cmd("SET").arg(key).arg(value)


def set_multiple(items: Any) -> Cmd:
    """Set several keys to their values."""
    return cmd("MSET").arg(items)


def set_ex(key: Any, value: Any, seconds: int) -> Cmd:
    """Set the value and expiration of a key."""
    return cmd("SETEX").arg(key).arg(seconds).arg(value)


def pset_ex(key: Any, value: Any, milliseconds: int) -> Cmd:
    """Set the value and expiration in milliseconds of a key."""
    return cmd("PSETEX").arg(key).arg(milliseconds).arg(value)


def set_nx(key: Any, value: Any) -> Cmd:
    """Set the value of a key only if it does not exist."""
    return cmd("SETNX").arg(key).arg(value)


def mset_nx(items: Any) -> Cmd:
    """Set several keys, failing if at least one already exists."""
    return cmd("MSETNX").arg(items)


def getset(key: Any, value: Any) -> Cmd:
    """Set the string value of a key and return its old value."""
    return cmd("GETSET").arg(key).arg(value)


def getrange(key: Any, start: int, end: int) -> Cmd:
    """Get a substring of a value; negative offsets count from the end."""
    return cmd("GETRANGE").arg(key).arg(start).arg(end)


def setrange(key: Any, offset: int, value: Any) -> Cmd:
    """Overwrite part of a value starting at an offset."""
    return cmd("SETRANGE").arg(key).arg(offset).arg(value)


def delete(key: Any) -> Cmd:
    """Delete one or more keys."""
    return cmd("DEL").arg(key)


def exists(key: Any) -> Cmd:
    """Determine if a key exists."""
    return cmd("EXISTS").arg(key)


def expire(key: Any, seconds: int) -> Cmd:
    """Set a key's time to live in seconds."""
    return cmd("EXPIRE").arg(key).arg(seconds)


def expire_at(key: Any, ts: int) -> Cmd:
    """Set the expiration of a key as a UNIX timestamp."""
    return cmd("EXPIREAT").arg(key).arg(ts)


def pexpire(key: Any, ms: int) -> Cmd:
    """Set a key's time to live in milliseconds."""
    return cmd("PEXPIRE").arg(key).arg(ms)


def pexpire_at(key: Any, ts: int) -> Cmd:
    """Set the expiration of a key as a UNIX timestamp in milliseconds."""
    return cmd("PEXPIREAT").arg(key).arg(ts)


def persist(key: Any) -> Cmd:
    """Remove the expiration from a key."""
    return cmd("PERSIST").arg(key)


def ttl(key: Any) -> Cmd:
    """Get the time to live of a key."""
    return cmd("TTL").arg(key)


def pttl(key: Any) -> Cmd:
    """Get the time to live of a key in milliseconds."""
    return cmd("PTTL").arg(key)


def rename(key: Any, new_key: Any) -> Cmd:
    """Rename a key."""
    return cmd("RENAME").arg(key).arg(new_key)


def rename_nx(key: Any, new_key: Any) -> Cmd:
    """Rename a key only if the new key does not exist."""
    return cmd("RENAMENX").arg(key).arg(new_key)


def unlink(key: Any) -> Cmd:
    """Unlink one or more keys."""
    return cmd("UNLINK").arg(key)


def append(key: Any, value: Any) -> Cmd:
    """Append a value to a key."""
    return cmd("APPEND").arg(key).arg(value)


def incr(key: Any, delta: Any) -> Cmd:
    """Increment a key by ``delta``, using ``INCRBYFLOAT`` for a float."""
    name = "INCRBYFLOAT" if is_float_number(delta) else "INCRBY"
    return cmd(name).arg(key).arg(delta)


def decr(key: Any, delta: Any) -> Cmd:
    """Decrement a key by ``delta``."""
    return cmd("DECRBY").arg(key).arg(delta)


def setbit(key: Any, offset: int, value: bool) -> Cmd:
    """Set or clear the bit at an offset."""
    return cmd("SETBIT").arg(key).arg(offset).arg(1 if value else 0)


def getbit(key: Any, offset: int) -> Cmd:
    """Get the bit at an offset."""
    return cmd("GETBIT").arg(key).arg(offset)


def bitcount(key: Any) -> Cmd:
    """Count the set bits of a value."""
    return cmd("BITCOUNT").arg(key)


def bitcount_range(key: Any, start: int, end: int) -> Cmd:
    """Count the set bits of a value within a byte range."""
    return cmd("BITCOUNT").arg(key).arg(start).arg(end)


def bit_and(dstkey: Any, srckeys: Any) -> Cmd:
    """Store the bitwise AND of keys in the destination key."""
    return cmd("BITOP").arg("AND").arg(dstkey).arg(srckeys)


def bit_or(dstkey: Any, srckeys: Any) -> Cmd:
    """Store the bitwise OR of keys in the destination key."""
    return cmd("BITOP").arg("OR").arg(dstkey).arg(srckeys)


def bit_xor(dstkey: Any, srckeys: Any) -> Cmd:
    """Store the bitwise XOR of keys in the destination key."""
    return cmd("BITOP").arg("XOR").arg(dstkey).arg(srckeys)


def bit_not(dstkey: Any, srckey: Any) -> Cmd:
    """Store the bitwise NOT of a key in the destination key."""
    return cmd("BITOP").arg("NOT").arg(dstkey).arg(srckey)


def strlen(key: Any) -> Cmd:
    """Get the length of the value stored in a key."""
    return cmd("STRLEN").arg(key)


def scan(con: Any) -> Iterator[Any]:
    """Iterate incrementally over the key space."""
    return cmd("SCAN").cursor_arg(0).iter(con)


def scan_match(con: Any, pattern: Any) -> Iterator[Any]:
    """Iterate incrementally over the keys matching a pattern."""
    return cmd("SCAN").cursor_arg(0).arg("MATCH").arg(pattern).iter(con)