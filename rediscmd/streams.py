"""Commands on streams."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rediscmd.cmd import Cmd, cmd


def xack(key: Any, group: Any, ids: Sequence[Any]) -> Cmd:
    """Acknowledge pending messages checked out by a consumer of a group."""
    return cmd("XACK").arg(key).arg(group).arg(ids)


def xadd(key: Any, entry_id: Any, items: Sequence[Any]) -> Cmd:
    """Add a message made of ``(field, value)`` pairs; ``*`` as id picks the current time."""
    return cmd("XADD").arg(key).arg(entry_id).arg(items)


def xadd_map(key: Any, entry_id: Any, mapping: Any) -> Cmd:
    """Add a message whose fields and values come from a mapping."""
    return cmd("XADD").arg(key).arg(entry_id).arg(mapping)


def xadd_maxlen(key: Any, maxlen: Any, entry_id: Any, items: Sequence[Any]) -> Cmd:
    """Add a message while capping the stream at a maximum length."""
    return cmd("XADD").arg(key).arg(maxlen).arg(entry_id).arg(items)


def xadd_maxlen_map(key: Any, maxlen: Any, entry_id: Any, mapping: Any) -> Cmd:
    """Add a message from a mapping while capping the stream at a maximum length."""
    return cmd("XADD").arg(key).arg(maxlen).arg(entry_id).arg(mapping)


def xclaim(key: Any, group: Any, consumer: Any, min_idle_time: Any, ids: Sequence[Any]) -> Cmd:
    """Claim pending messages that have been idle for at least ``min_idle_time``."""
    return cmd("XCLAIM").arg(key).arg(group).arg(consumer).arg(min_idle_time).arg(ids)


def xclaim_options(
    key: Any,
    group: Any,
    consumer: Any,
    min_idle_time: Any,
    ids: Sequence[Any],
    options: Any,
) -> Cmd:
    """Claim pending messages, passing extra claim options after the ids."""
    return (
        cmd("XCLAIM")
        .arg(key)
        .arg(group)
        .arg(consumer)
        .arg(min_idle_time)
        .arg(ids)
        .arg(options)
    )


def xdel(key: Any, ids: Sequence[Any]) -> Cmd:
    """Delete messages from a stream by id."""
    return cmd("XDEL").arg(key).arg(ids)


def xgroup_create(key: Any, group: Any, entry_id: Any) -> Cmd:
    """Create a consumer group on an existing stream, starting at ``entry_id``."""
    return cmd("XGROUP").arg("CREATE").arg(key).arg(group).arg(entry_id)


def xgroup_create_mkstream(key: Any, group: Any, entry_id: Any) -> Cmd:
    """Create a consumer group, creating the stream if it does not exist."""
    return cmd("XGROUP").arg("CREATE").arg(key).arg(group).arg(entry_id).arg("MKSTREAM")


def xgroup_setid(key: Any, group: Any, entry_id: Any) -> Cmd:
    """Set the id a consumer group reads from next."""
    return cmd("XGROUP").arg("SETID").arg(key).arg(group).arg(entry_id)


def xgroup_destroy(key: Any, group: Any) -> Cmd:
    """Destroy a consumer group."""
    return cmd("XGROUP").arg("DESTROY").arg(key).arg(group)


def xgroup_delconsumer(key: Any, group: Any, consumer: Any) -> Cmd:
    """Remove a consumer from a consumer group."""
    return cmd("XGROUP").arg("DELCONSUMER").arg(key).arg(group).arg(consumer)


def xinfo_consumers(key: Any, group: Any) -> Cmd:
    """Describe the consumers of a consumer group."""
    return cmd("XINFO").arg("CONSUMERS").arg(key).arg(group)


def xinfo_groups(key: Any) -> Cmd:
    """Describe the consumer groups of a stream."""
    return cmd("XINFO").arg("GROUPS").arg(key)


def xinfo_stream(key: Any) -> Cmd:
    """Describe a stream: length, first and last entries, groups."""
    return cmd("XINFO").arg("STREAM").arg(key)


def xlen(key: Any) -> Cmd:
    """Return the number of messages in a stream."""
    return cmd("XLEN").arg(key)


def xpending(key: Any, group: Any) -> Cmd:
    """Summarise the messages a group has delivered but not had acknowledged."""
    return cmd("XPENDING").arg(key).arg(group)


def xpending_count(key: Any, group: Any, start: Any, end: Any, count: Any) -> Cmd:
    """List up to ``count`` pending messages of a group between two ids."""
    return cmd("XPENDING").arg(key).arg(group).arg(start).arg(end).arg(count)


def xpending_consumer_count(
    key: Any, group: Any, start: Any, end: Any, count: Any, consumer: Any
) -> Cmd:
    """List up to ``count`` pending messages of one consumer between two ids."""
    return (
        cmd("XPENDING").arg(key).arg(group).arg(start).arg(end).arg(count).arg(consumer)
    )


def xrange(key: Any, start: Any, end: Any) -> Cmd:
    """Return the messages between two ids; ``-`` and ``+`` mean the ends."""
    return cmd("XRANGE").arg(key).arg(start).arg(end)


def xrange_all(key: Any) -> Cmd:
    """Return every message of a stream."""
    return cmd("XRANGE").arg(key).arg("-").arg("+")


def xrange_count(key: Any, start: Any, end: Any, count: Any) -> Cmd:
    """Return up to ``count`` messages between two ids."""
    return cmd("XRANGE").arg(key).arg(start).arg(end).arg("COUNT").arg(count)


def xread(keys: Sequence[Any], ids: Sequence[Any]) -> Cmd:
    """Read from several streams, each after the matching id."""
    return cmd("XREAD").arg("STREAMS").arg(keys).arg(ids)


def xrevrange(key: Any, end: Any, start: Any) -> Cmd:
    """Return the messages between two ids, newest first."""
    return cmd("XREVRANGE").arg(key).arg(end).arg(start)


def xrevrange_all(key: Any) -> Cmd:
    """Return every message of a stream, newest first."""
    return cmd("XREVRANGE").arg(key).arg("+").arg("-")


def xrevrange_count(key: Any, end: Any, start: Any, count: Any) -> Cmd:
    """Return up to ``count`` messages between two ids, newest first."""
    return cmd("XREVRANGE").arg(key).arg(end).arg(start).arg("COUNT").arg(count)


def xtrim(key: Any, maxlen: Any) -> Cmd:
    """Trim a stream to a maximum length."""
    return cmd("XTRIM").arg(key).arg(maxlen)