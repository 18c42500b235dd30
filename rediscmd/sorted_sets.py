"""Commands on sorted sets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from rediscmd.cmd import Cmd, cmd


def zadd(key: Any, member: Any, score: Any) -> Cmd:
    """Add a member to a sorted set or update its score."""
    return cmd("ZADD").arg(key).arg(score).arg(member)


def zadd_multiple(key: Any, items: Any) -> Cmd:
    """Add several ``(score, member)`` pairs to a sorted set."""
    return cmd("ZADD").arg(key).arg(items)


def zcard(key: Any) -> Cmd:
    """Get the number of members of a sorted set."""
    return cmd("ZCARD").arg(key)


def zcount(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Count the members with scores within the given bounds."""
    return cmd("ZCOUNT").arg(key).arg(minimum).arg(maximum)


def zincr(key: Any, member: Any, delta: Any) -> Cmd:
    """Increment the score of a member, adding it if missing."""
    return cmd("ZINCRBY").arg(key).arg(delta).arg(member)


def _store(name: str, dstkey: Any, keys: Sequence[Any], aggregate: str | None) -> Cmd:
    command = cmd(name).arg(dstkey).arg(len(keys)).arg(keys)
    if aggregate is not None:
        command.arg("AGGREGATE").arg(aggregate)
    return command


def zinterstore(dstkey: Any, keys: Sequence[Any]) -> Cmd:
    """Intersect sorted sets into a key, summing scores."""
    return _store("ZINTERSTORE", dstkey, keys, None)


def zinterstore_min(dstkey: Any, keys: Sequence[Any]) -> Cmd:
    """Intersect sorted sets into a key, keeping the lowest score."""
    return _store("ZINTERSTORE", dstkey, keys, "MIN")


def zinterstore_max(dstkey: Any, keys: Sequence[Any]) -> Cmd:
    """Intersect sorted sets into a key, keeping the highest score."""
    return _store("ZINTERSTORE", dstkey, keys, "MAX")


def zlexcount(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Count the members within a lexicographical range."""
    return cmd("ZLEXCOUNT").arg(key).arg(minimum).arg(maximum)


def zpopmax(key: Any, count: int) -> Cmd:
    """Remove and return up to ``count`` members with the highest scores."""
    return cmd("ZPOPMAX").arg(key).arg(count)


def zpopmin(key: Any, count: int) -> Cmd:
    """Remove and return up to ``count`` members with the lowest scores."""
    return cmd("ZPOPMIN").arg(key).arg(count)


def zrandmember(key: Any, count: int | None) -> Cmd:
    """Return up to ``count`` random members, or one if ``count`` is None."""
    return cmd("ZRANDMEMBER").arg(key).arg(count)


def zrandmember_withscores(key: Any, count: int) -> Cmd:
    """Return up to ``count`` random members with their scores."""
    return cmd("ZRANDMEMBER").arg(key).arg(count).arg("WITHSCORES")


def zrange(key: Any, start: int, stop: int) -> Cmd:
    """Return members by index."""
    return cmd("ZRANGE").arg(key).arg(start).arg(stop)


def zrange_withscores(key: Any, start: int, stop: int) -> Cmd:
    """Return members by index, with scores."""
    return cmd("ZRANGE").arg(key).arg(start).arg(stop).arg("WITHSCORES")


def zrangebylex(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Return members by lexicographical range."""
    return cmd("ZRANGEBYLEX").arg(key).arg(minimum).arg(maximum)


def zrangebylex_limit(key: Any, minimum: Any, maximum: Any, offset: int, count: int) -> Cmd:
    """Return members by lexicographical range with offset and limit."""
    return (
        cmd("ZRANGEBYLEX").arg(key).arg(minimum).arg(maximum).arg("LIMIT").arg(offset).arg(count)
    )


def zrevrangebylex(key: Any, maximum: Any, minimum: Any) -> Cmd:
    """Return members by lexicographical range, high to low."""
    return cmd("ZREVRANGEBYLEX").arg(key).arg(maximum).arg(minimum)


def zrevrangebylex_limit(key: Any, maximum: Any, minimum: Any, offset: int, count: int) -> Cmd:
    """Return members by lexicographical range, high to low, with offset and limit."""
    return (
        cmd("ZREVRANGEBYLEX")
        .arg(key)
        .arg(maximum)
        .arg(minimum)
        .arg("LIMIT")
        .arg(offset)
        .arg(count)
    )


def zrangebyscore(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Return members by score."""
    return cmd("ZRANGEBYSCORE").arg(key).arg(minimum).arg(maximum)


def zrangebyscore_withscores(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Return members by score, with scores."""
    return cmd("ZRANGEBYSCORE").arg(key).arg(minimum).arg(maximum).arg("WITHSCORES")


def zrangebyscore_limit(key: Any, minimum: Any, maximum: Any, offset: int, count: int) -> Cmd:
    """Return members by score with offset and limit."""
    return (
        cmd("ZRANGEBYSCORE")
        .arg(key)
        .arg(minimum)
        .arg(maximum)
        .arg("LIMIT")
        .arg(offset)
        .arg(count)
    )


def zrangebyscore_limit_withscores(
    key: Any, minimum: Any, maximum: Any, offset: int, count: int
) -> Cmd:
    """Return members by score with offset, limit and scores."""
    return (
        cmd("ZRANGEBYSCORE")
        .arg(key)
        .arg(minimum)
        .arg(maximum)
        .arg("WITHSCORES")
        .arg("LIMIT")
        .arg(offset)
        .arg(count)
    )


def zrank(key: Any, member: Any) -> Cmd:
    """Determine the index of a member."""
    return cmd("ZRANK").arg(key).arg(member)


def zrem(key: Any, members: Any) -> Cmd:
    """Remove one or more members."""
    return cmd("ZREM").arg(key).arg(members)


def zrembylex(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Remove members within a lexicographical range."""
    return cmd("ZREMRANGEBYLEX").arg(key).arg(minimum).arg(maximum)


def zremrangebyrank(key: Any, start: int, stop: int) -> Cmd:
    """Remove members within a range of indexes."""
    return cmd("ZREMRANGEBYRANK").arg(key).arg(start).arg(stop)


def zrembyscore(key: Any, minimum: Any, maximum: Any) -> Cmd:
    """Remove members within a range of scores."""
    return cmd("ZREMRANGEBYSCORE").arg(key).arg(minimum).arg(maximum)


def zrevrange(key: Any, start: int, stop: int) -> Cmd:
    """Return members by index, high to low."""
    return cmd("ZREVRANGE").arg(key).arg(start).arg(stop)


def zrevrange_withscores(key: Any, start: int, stop: int) -> Cmd:
    """Return members by index, high to low, with scores."""
    return cmd("ZREVRANGE").arg(key).arg(start).arg(stop).arg("WITHSCORES")


def zrevrangebyscore(key: Any, maximum: Any, minimum: Any) -> Cmd:
    """Return members by score, high to low."""
    return cmd("ZREVRANGEBYSCORE").arg(key).arg(maximum).arg(minimum)


def zrevrangebyscore_withscores(key: Any, maximum: Any, minimum: Any) -> Cmd:
    """Return members by score, high to low, with scores."""
    return cmd("ZREVRANGEBYSCORE").arg(key).arg(maximum).arg(minimum).arg("WITHSCORES")


def zrevrangebyscore_limit(key: Any, maximum: Any, minimum: Any, offset: int, count: int) -> Cmd:
    """Return members by score, high to low, with offset and limit."""
    return (
        cmd("ZREVRANGEBYSCORE")
        .arg(key)
        .arg(maximum)
        .arg(minimum)
        .arg("LIMIT")
        .arg(offset)
        .arg(count)
    )


def zrevrangebyscore_limit_withscores(
    key: Any, maximum: Any, minimum: Any, offset: int, count: int
) -> Cmd:
    """Return members by score, high to low, with offset, limit and scores."""
    return (
        cmd("ZREVRANGEBYSCORE")
        .arg(key)
        .arg(maximum)
        .arg(minimum)
        .arg("WITHSCORES")
        .arg("LIMIT")
        .arg(offset)
        .arg(count)
    )


def zrevrank(key: Any, member: Any) -> Cmd:
    """Determine the index of a member, scores ordered high to low."""
    return cmd("ZREVRANK").arg(key).arg(member)


def zscore(key: Any, member: Any) -> Cmd:
    """Get the score of a member."""
    return cmd("ZSCORE").arg(key).arg(member)


def zscore_multiple(key: Any, members: Sequence[Any]) -> Cmd:
    """Get the scores of several members."""
    return cmd("ZMSCORE").arg(key).arg(members)


def zunionstore(dstkey: Any, keys: Sequence[Any]) -> Cmd:
    """Union sorted sets into a key, summing scores."""
    return _store("ZUNIONSTORE", dstkey, keys, None)


def zunionstore_min(dstkey: Any, keys: Sequence[Any]) -> Cmd:
    """Union sorted sets into a key, keeping the lowest score."""
    return _store("ZUNIONSTORE", dstkey, keys, "MIN")


def zunionstore_max(dstkey: Any, keys: Sequence[Any]) -> Cmd:
    """Union sorted sets into a key, keeping the highest score."""
    return _store("ZUNIONSTORE", dstkey, keys, "MAX")


def zscan(con: Any, key: Any) -> Iterator[Any]:
    """Iterate incrementally over the members of a sorted set."""
    return cmd("ZSCAN").arg(key).cursor_arg(0).iter(con)


def zscan_match(con: Any, key: Any, pattern: Any) -> Iterator[Any]:
    """Iterate incrementally over the sorted set members matching a pattern."""
    return cmd("ZSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern).iter(con)