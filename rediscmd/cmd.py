"""Building and encoding redis commands, and iterating over cursor replies."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol


class _Connection(Protocol):
    """What a connection must offer to run commands."""

    def req_command(self, cmd: Cmd) -> Any:
        ...

    def req_packed_command(self, packed: bytes) -> Any:
        ...


def to_redis_args(value: Any) -> list[bytes]:
    """Turn a value into the list of raw arguments it contributes to a command.

    Strings and byte strings give one argument, numbers their decimal form,
    booleans ``1`` or ``0``, ``None`` nothing at all.  Lists, tuples and sets
    are flattened, mappings give key and value in turn, and objects with a
    ``redis_args()`` method give what that method returns.
    """
    if value is None:
        return []
    if isinstance(value, bytes):
        return [value]
    if isinstance(value, (bytearray, memoryview)):
        return [bytes(value)]
    if isinstance(value, str):
        return [value.encode("utf-8")]
    if isinstance(value, bool):
        return [b"1" if value else b"0"]
    if isinstance(value, int):
        return [str(value).encode("ascii")]
    if isinstance(value, float):
        return [repr(value).encode("ascii")]
    redis_args = getattr(value, "redis_args", None)
    if callable(redis_args):
        return [bytes(item) for item in redis_args()]
    if isinstance(value, Mapping):
        return [
            arg
            for key, item in value.items()
            for arg in (*to_redis_args(key), *to_redis_args(item))
        ]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [arg for item in value for arg in to_redis_args(item)]
    raise TypeError(f"cannot use {type(value).__name__} as a redis argument")


def is_single_arg(value: Any) -> bool:
    """Tell whether a value stands for exactly one argument (GET rather than MGET)."""
    if value is None:
        return False
    if isinstance(value, (bytes, bytearray, memoryview, str, int, float)):
        return True
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 1 and is_single_arg(next(iter(value)))
    return len(to_redis_args(value)) == 1


def is_float_number(value: Any) -> bool:
    """Tell whether a numeric argument has to go to the float variant of a command."""
    return isinstance(value, float)


def _encode(args: list[bytes | None], cursor: int) -> bytes:
    parts = [b"*%d\r\n" % len(args)]
    cursor_bytes = str(cursor).encode("ascii")
    for item in args:
        data = cursor_bytes if item is None else item
        parts.append(b"$%d\r\n" % len(data))
        parts.append(data)
        parts.append(b"\r\n")
    return b"".join(parts)


def _as_batch(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _looks_like_cursor(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) == 2
        and isinstance(value[0], bytes)
        and isinstance(value[1], list)
    )


class Cmd:
    """A redis command assembled argument by argument.

    ``arg`` and ``cursor_arg`` return the command itself so calls can be
    chained: ``cmd("SET").arg("my_key").arg(42)``.
    """

    def __init__(self) -> None:
        self._args: list[bytes | None] = []
        self._cursor: int | None = None

    def __repr__(self) -> str:
        return f"Cmd({self._args!r}, cursor={self._cursor!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cmd):
            return NotImplemented
        return self._args == other._args and self._cursor == other._cursor

    def arg(self, value: Any) -> Cmd:
        """Append the arguments a value stands for."""
        self._args.extend(to_redis_args(value))
        return self

    def cursor_arg(self, cursor: int) -> Cmd:
        """Append a cursor argument and switch the command to scan mode."""
        if self.in_scan_mode():
            raise RuntimeError("command is already in scan mode")
        self._cursor = cursor
        self._args.append(None)
        return self

    def get_packed_command(self) -> bytes:
        """Return the command encoded in the redis wire protocol."""
        return _encode(self._args, self._cursor or 0)

    def in_scan_mode(self) -> bool:
        """Tell whether a cursor argument has been added."""
        return self._cursor is not None

    def args_iter(self) -> Iterator[bytes | None]:
        """Yield the arguments, the command name first; a cursor argument is ``None``."""
        yield from self._args

    def arg_idx(self, idx: int) -> bytes | None:
        """Return the argument at ``idx``, or ``None`` if there is none or it is a cursor."""
        if idx < 0 or idx >= len(self._args):
            return None
        value = self._args[idx]
        if value is None or (idx == 0 and not value):
            return None
        return value

    def query(self, con: _Connection) -> Any:
        """Send the command over a connection and return the reply."""
        return con.req_command(self)

    def execute(self, con: _Connection) -> None:
        """Send the command and discard the reply; errors are still raised."""
        self.query(con)

    def iter(self, con: _Connection) -> Iterator[Any]:
        """Send the command and iterate over the items of the reply.

        For a cursor reply the iterator keeps asking the server for further
        batches until the cursor comes back as zero.  A failure while fetching
        a later batch ends the iteration.
        """
        reply = con.req_command(self)
        if _looks_like_cursor(reply):
            cursor = int(reply[0])
            batch = reply[1]
        else:
            cursor = 0
            batch = _as_batch(reply)
        return self._scan(con, list(self._args), self.in_scan_mode(), cursor, batch)

    @staticmethod
    def _scan(
        con: _Connection,
        args: list[bytes | None],
        scan_mode: bool,
        cursor: int,
        batch: list[Any],
    ) -> Iterator[Any]:
        while True:
            yield from batch
            if cursor == 0 or not scan_mode:
                return
            try:
                reply = con.req_packed_command(_encode(args, cursor))
                cursor = int(reply[0])
                batch = list(reply[1])
            except Exception:
                return


def cmd(name: str) -> Cmd:
    """Start a command with its name as the first argument."""
    return Cmd().arg(name)


def pack_command(args: list[bytes]) -> bytes:
    """Encode a list of raw arguments as one request."""
    return _encode([bytes(item) for item in args], 0)