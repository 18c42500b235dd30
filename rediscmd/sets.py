"""Commands on sets, HyperLogLogs and publishing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from rediscmd.cmd import Cmd, cmd


def sadd(key: Any, member: Any) -> Cmd:
    """Add one or more members to a set."""
    return cmd("SADD").arg(key).arg(member)


def scard(key: Any) -> Cmd:
    """Get the number of members in a set."""
    return cmd("SCARD").arg(key)


def sdiff(keys: Any) -> Cmd:
    """Subtract several sets."""
    return cmd("SDIFF").arg(keys)


def sdiffstore(dstkey: Any, keys: Any) -> Cmd:
    """Subtract several sets and store the result in a key."""
    return cmd("SDIFFSTORE").arg(dstkey).arg(keys)


def sinter(keys: Any) -> Cmd:
    """Intersect several sets."""
    return cmd("SINTER").arg(keys)


def sinterstore(dstkey: Any, keys: Any) -> Cmd:
    """Intersect several sets and store the result in a key."""
    return cmd("SINTERSTORE").arg(dstkey).arg(keys)


def sismember(key: Any, member: Any) -> Cmd:
    """Determine whether a value is a member of a set."""
    return cmd("SISMEMBER").arg(key).arg(member)


def smembers(key: Any) -> Cmd:
    """Get all the members of a set."""
    return cmd("SMEMBERS").arg(key)


def smove(srckey: Any, dstkey: Any, member: Any) -> Cmd:
    """Move a member from one set to another."""
    return cmd("SMOVE").arg(srckey).arg(dstkey).arg(member)


def spop(key: Any) -> Cmd:
    """Remove and return a random member of a set."""
    return cmd("SPOP").arg(key)


def srandmember(key: Any) -> Cmd:
    """Get one random member of a set."""
    return cmd("SRANDMEMBER").arg(key)


def srandmember_multiple(key: Any, count: int) -> Cmd:
    """Get several random members of a set."""
    return cmd("SRANDMEMBER").arg(key).arg(count)


def srem(key: Any, member: Any) -> Cmd:
    """Remove one or more members from a set."""
    return cmd("SREM").arg(key).arg(member)


def sunion(keys: Any) -> Cmd:
    """Add several sets together."""
    return cmd("SUNION").arg(keys)


def sunionstore(dstkey: Any, keys: Any) -> Cmd:
    """Add several sets together and store the result in a key."""
    return cmd("SUNIONSTORE").arg(dstkey).arg(keys)


def pfadd(key: Any, element: Any) -> Cmd:
    """Add elements to a HyperLogLog."""
    return cmd("PFADD").arg(key).arg(element)


def pfcount(key: Any) -> Cmd:
    """Get the approximated cardinality of one or more HyperLogLogs."""
    return cmd("PFCOUNT").arg(key)


def pfmerge(dstkey: Any, srckeys: Any) -> Cmd:
    """Merge several HyperLogLogs into one."""
    return cmd("PFMERGE").arg(dstkey).arg(srckeys)


def publish(channel: Any, message: Any) -> Cmd:
    """Post a message to a channel."""
    return cmd("PUBLISH").arg(channel).arg(message)


def sscan(con: Any, key: Any) -> Iterator[Any]:
    """Iterate incrementally over the members of a set."""
    return cmd("SSCAN").arg(key).cursor_arg(0).iter(con)


def sscan_match(con: Any, key: Any, pattern: Any) -> Iterator[Any]:
    """Iterate incrementally over the set members matching a pattern."""
    return cmd("SSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern).iter(con)