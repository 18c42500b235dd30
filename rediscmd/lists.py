"""Commands on lists."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from rediscmd.cmd import Cmd, cmd


class Direction(enum.Enum):
    """The LEFT or RIGHT end of a list."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def redis_args(self) -> list[bytes]:
        """Return the argument this direction stands for."""
        return [self.value.encode("ascii")]


@dataclass
class LposOptions:
    """Options of the ``LPOS`` command; unset options are left out."""

    count: int | None = None
    rank: int | None = None
    maxlen: int | None = None

    def redis_args(self) -> list[bytes]:
        """Return the arguments for the options that are set."""
        result: list[bytes] = []
        for name, value in ((b"COUNT", self.count), (b"RANK", self.rank), (b"MAXLEN", self.maxlen)):
            if value is not None:
                result += [name, str(value).encode("ascii")]
        return result


def _check_count(count: int | None) -> int | None:
    if count is not None and count <= 0:
        raise ValueError("count must be a positive integer")
    return count


def blmove(srckey: Any, dstkey: Any, src_dir: Direction, dst_dir: Direction, timeout: int) -> Cmd:
    """Move an element between lists, blocking until one is available."""
    return cmd("BLMOVE").arg(srckey).arg(dstkey).arg(src_dir).arg(dst_dir).arg(timeout)


def blmpop(timeout: int, numkeys: int, key: Any, direction: Direction, count: int) -> Cmd:
    """Pop ``count`` elements from the first non-empty list, blocking if needed."""
    return (
        cmd("BLMPOP").arg(timeout).arg(numkeys).arg(key).arg(direction).arg("COUNT").arg(count)
    )


def blpop(key: Any, timeout: int) -> Cmd:
    """Remove and get the first element of a list, blocking if needed."""
    return cmd("BLPOP").arg(key).arg(timeout)


def brpop(key: Any, timeout: int) -> Cmd:
    """Remove and get the last element of a list, blocking if needed."""
    return cmd("BRPOP").arg(key).arg(timeout)


def brpoplpush(srckey: Any, dstkey: Any, timeout: int) -> Cmd:
    """Pop from one list and push onto another, blocking if needed."""
    return cmd("BRPOPLPUSH").arg(srckey).arg(dstkey).arg(timeout)


def lindex(key: Any, index: int) -> Cmd:
    """Get an element of a list by its index."""
    return cmd("LINDEX").arg(key).arg(index)


def linsert_before(key: Any, pivot: Any, value: Any) -> Cmd:
    """Insert an element before another one."""
    return cmd("LINSERT").arg(key).arg("BEFORE").arg(pivot).arg(value)


def linsert_after(key: Any, pivot: Any, value: Any) -> Cmd:
    """Insert an element after another one."""
    return cmd("LINSERT").arg(key).arg("AFTER").arg(pivot).arg(value)


def llen(key: Any) -> Cmd:
    """Get the length of a list."""
    return cmd("LLEN").arg(key)


def lmove(srckey: Any, dstkey: Any, src_dir: Direction, dst_dir: Direction) -> Cmd:
    """Pop an element from one list and push it onto another."""
    return cmd("LMOVE").arg(srckey).arg(dstkey).arg(src_dir).arg(dst_dir)


def lmpop(numkeys: int, key: Any, direction: Direction, count: int) -> Cmd:
    """Pop ``count`` elements from the first non-empty list."""
    return cmd("LMPOP").arg(numkeys).arg(key).arg(direction).arg("COUNT").arg(count)


def lpop(key: Any, count: int | None) -> Cmd:
    """Remove and return up to ``count`` first elements; one if ``count`` is None."""
    return cmd("LPOP").arg(key).arg(_check_count(count))


def lpos(key: Any, value: Any, options: LposOptions) -> Cmd:
    """Find the index of matching elements in a list."""
    return cmd("LPOS").arg(key).arg(value).arg(options)


def lpush(key: Any, value: Any) -> Cmd:
    """Insert values at the head of a list."""
    return cmd("LPUSH").arg(key).arg(value)


def lpush_exists(key: Any, value: Any) -> Cmd:
    """Insert a value at the head of a list only if it exists."""
    return cmd("LPUSHX").arg(key).arg(value)


def lrange(key: Any, start: int, stop: int) -> Cmd:
    """Get a range of elements of a list."""
    return cmd("LRANGE").arg(key).arg(start).arg(stop)


def lrem(key: Any, count: int, value: Any) -> Cmd:
    """Remove the first ``count`` occurrences of a value."""
    return cmd("LREM").arg(key).arg(count).arg(value)


def ltrim(key: Any, start: int, stop: int) -> Cmd:
    """Trim a list to the given range."""
    return cmd("LTRIM").arg(key).arg(start).arg(stop)


def lset(key: Any, index: int, value: Any) -> Cmd:
    """Set the element at an index."""
    return cmd("LSET").arg(key).arg(index).arg(value)


def rpop(key: Any, count: int | None) -> Cmd:
    """Remove and return up to ``count`` last elements; one if ``count`` is None."""
    return cmd("RPOP").arg(key).arg(_check_count(count))


def rpoplpush(key: Any, dstkey: Any) -> Cmd:
    """Pop from one list and push onto another."""
    return cmd("RPOPLPUSH").arg(key).arg(dstkey)


def rpush(key: Any, value: Any) -> Cmd:
    """Insert values at the tail of a list."""
    return cmd("RPUSH").arg(key).arg(value)


def rpush_exists(key: Any, value: Any) -> Cmd:
    """Insert a value at the tail of a list only if it exists."""
    return cmd("RPUSHX").arg(key).arg(value)