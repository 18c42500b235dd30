"""Deciding which cluster node a command has to be sent to."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from rediscmd.cmd import Cmd

SLOT_SIZE = 16384

_ALL_MASTERS = frozenset({b"FLUSHALL", b"FLUSHDB", b"SCRIPT"})
_ALL_NODES = frozenset(
    {
        b"ECHO",
        b"CONFIG",
        b"CLIENT",
        b"SLOWLOG",
        b"DBSIZE",
        b"LASTSAVE",
        b"PING",
        b"INFO",
        b"BGREWRITEAOF",
        b"BGSAVE",
        b"CLIENT LIST",
        b"SAVE",
        b"TIME",
        b"KEYS",
    }
)
_UNROUTABLE = frozenset(
    {
        b"SCAN",
        b"CLIENT SETNAME",
        b"SHUTDOWN",
        b"SLAVEOF",
        b"REPLICAOF",
        b"SCRIPT KILL",
        b"MOVE",
        b"BITOP",
    }
)
_U64_LIMIT = 1 << 64


def _make_crc_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            crc = (crc << 1) ^ 0x1021 if crc & 0x8000 else crc << 1
            crc &= 0xFFFF
        table.append(crc)
    return tuple(table)


_CRC_TABLE = _make_crc_table()


def crc16(data: bytes) -> int:
    """Return the CRC-16/XMODEM checksum of ``data``."""
    crc = 0
    for byte in data:
        crc = ((crc << 8) & 0xFFFF) ^ _CRC_TABLE[((crc >> 8) ^ byte) & 0xFF]
    return crc


def get_hashtag(key: bytes) -> bytes | None:
    """Return the non-empty part between the first ``{`` and the next ``}``, if any."""
    open_pos = key.find(b"{")
    if open_pos < 0:
        return None
    close_pos = key.find(b"}", open_pos)
    if close_pos < 0:
        return None
    tag = key[open_pos + 1 : close_pos]
    return tag or None


class RoutingKind(enum.Enum):
    """Where a command goes."""

    ALL_NODES = "all_nodes"
    ALL_MASTERS = "all_masters"
    RANDOM = "random"
    SLOT = "slot"


def _arg_idx(routable: Any, idx: int) -> bytes | None:
    if isinstance(routable, Cmd):
        return routable.arg_idx(idx)
    if isinstance(routable, (list, tuple)):
        if 0 <= idx < len(routable):
            item = routable[idx]
            if isinstance(item, (bytes, bytearray)):
                return bytes(item)
        return None
    return None


def _position(routable: Any, candidate: bytes) -> int | None:
    if isinstance(routable, Cmd):
        items: Sequence[Any] = list(routable.args_iter())
    elif isinstance(routable, (list, tuple)):
        items = routable
    else:
        return None
    wanted = candidate.upper()
    for index, item in enumerate(items):
        if isinstance(item, (bytes, bytearray)) and bytes(item).upper() == wanted:
            return index
    return None


def _parse_key_count(data: bytes | None) -> int | None:
    if data is None:
        return None
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError:
        return None
    if text.startswith("+"):
        text = text[1:]
    if not text.isdigit():
        return None
    value = int(text)
    return value if value < _U64_LIMIT else None


@dataclass(frozen=True)
class RoutingInfo:
    """The routing decision for one command: a kind and, for ``SLOT``, the slot."""

    kind: RoutingKind
    slot: int | None = None

    @staticmethod
    def for_key(key: bytes) -> RoutingInfo:
        """Route to the slot of a key, honouring a ``{hashtag}`` in it."""
        tag = get_hashtag(key)
        return RoutingInfo(RoutingKind.SLOT, crc16(tag if tag is not None else key) % SLOT_SIZE)

    @staticmethod
    def for_routable(routable: Any) -> RoutingInfo | None:
        """Route a command, given as a ``Cmd`` or as a list of byte arguments.

        Returns ``None`` when the command cannot be routed to a single place.
        """
        first = _arg_idx(routable, 0)
        if first is None:
            return None
        command = first.upper()

        if command in _ALL_MASTERS:
            return RoutingInfo(RoutingKind.ALL_MASTERS)
        if command in _ALL_NODES:
            return RoutingInfo(RoutingKind.ALL_NODES)
        if command in _UNROUTABLE:
            return None
        if command in (b"EVALSHA", b"EVAL"):
            key_count = _parse_key_count(_arg_idx(routable, 2))
            if key_count is None:
                return None
            if key_count == 0:
                return RoutingInfo(RoutingKind.RANDOM)
            key = _arg_idx(routable, 3)
            return RoutingInfo.for_key(key) if key is not None else None
        if command in (b"XGROUP", b"XINFO"):
            key = _arg_idx(routable, 2)
            return RoutingInfo.for_key(key) if key is not None else None
        if command in (b"XREAD", b"XREADGROUP"):
            streams_position = _position(routable, b"STREAMS")
            if streams_position is None:
                return None
            key = _arg_idx(routable, streams_position + 1)
            return RoutingInfo.for_key(key) if key is not None else None

        key = _arg_idx(routable, 1)
        if key is None:
            return RoutingInfo(RoutingKind.RANDOM)
        return RoutingInfo.for_key(key)


@dataclass(frozen=True)
class Slot:
    """A range of slots served by a master and its replicas."""

    start: int
    end: int
    master: str
    replicas: list[str] = field(default_factory=list)