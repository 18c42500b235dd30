# rediscmd

`rediscmd` builds Redis commands and encodes them in the Redis wire
protocol (RESP). It also works out which cluster slot a command belongs to.
It has no dependencies outside the standard library.

## Installation

```
pip install rediscmd
```

To install with the test dependencies:

```
pip install "rediscmd[test]"
```

## Building commands

```python
from rediscmd.cmd import cmd, pack_command

c = cmd("SET").arg("my_key").arg(42)
c.get_packed_command()
# b"*3\r\n$3\r\nSET\r\n$6\r\nmy_key\r\n$2\r\n42\r\n"

pack_command([b"SET", b"my_key", b"42"])
```

`Cmd.arg` returns the command, so calls can be chained. The value you pass
is turned into arguments by `to_redis_args`:

- strings (UTF-8) and bytes give one argument;
- integers and floats give their decimal form, booleans `1` or `0`;
- `None` gives no argument at all;
- lists, tuples and sets are flattened, so `[("f1", 1), ("f2", 2)]` gives
  four arguments;
- mappings give each key followed by its value;
- any object with a `redis_args()` method gives what that method returns.

Any other type raises `TypeError`.

`Cmd.cursor_arg(cursor)` adds a cursor argument and puts the command in scan
mode. Calling it a second time raises `RuntimeError`. `Cmd.args_iter()`
yields the arguments, with `None` in the cursor's place. `Cmd.arg_idx(i)`
returns one argument, or `None` if there is none at that index.

`is_single_arg(value)` reports whether a value stands for exactly one
argument. `is_float_number(value)` reports whether a value is a float.

## Command helpers

Each data-type module has functions that return ready-made `Cmd` objects:

```python
from rediscmd import strings, hashes, lists, sets, sorted_sets, streams, geo, acl

strings.get("a")                   # GET a
strings.get(["a", "b"])            # MGET a b
strings.incr("counter", 1.5)       # INCRBYFLOAT counter 1.5
strings.delete(["a", "b"])         # DEL a b
hashes.hset_multiple("h", [("f1", 1), ("f2", 2)])
hashes.hincr("h", "f1", 1)         # HINCRBY h f1 1
lists.lpos("l", "x", lists.LposOptions(count=2, rank=1))   # LPOS l x COUNT 2 RANK 1
lists.lmove("src", "dst", lists.Direction.LEFT, lists.Direction.RIGHT)
lists.lpop("l", None)              # LPOP l
sets.sadd("s", [1, 2, 3])
sorted_sets.zadd("z", "one", 1)    # ZADD z 1 one
sorted_sets.zinterstore_max("out", ["z1", "z2"])  # ZINTERSTORE out 2 z1 z2 AGGREGATE MAX
streams.xadd("s1", "*", [("field", "value")])
streams.xread(["s1"], ["0"])
geo.geo_add("places", [(13.361389, 38.115556, "Palermo")])
acl.acl_genpass_bits(128)
```

`lists.lpop` and `lists.rpop` raise `ValueError` for a count that is zero or
negative. The geospatial unit and radius options and the stream `maxlen` and
claim options take plain values or any object with a `redis_args()` method.

## Sending commands

You send a command by passing in a connection object. `Cmd.query(con)`
calls `con.req_command(cmd)` and returns the reply unchanged.
`Cmd.execute(con)` does the same but discards the reply. Errors raised by
the connection propagate in both cases.

```python
reply = strings.get("my_key").query(con)
strings.set("my_key", 42).execute(con)
```

`Cmd.iter(con)` and the scan helpers return iterators. These are
`strings.scan`, `strings.scan_match`, `hashes.hscan`, `hashes.hscan_match`,
`sets.sscan`, `sets.sscan_match`, `sorted_sets.zscan` and
`sorted_sets.zscan_match`.

A reply of the form `[cursor, items]` is read as a cursor reply. In that
case the iterator sends the command again, with the new cursor, through
`con.req_packed_command(packed_bytes)`. It stops once the cursor comes back
as zero. If fetching a later batch fails, the iteration simply ends. Any
other reply is iterated over as it is.

```python
for member in sets.sscan(con, "my_set"):
    ...
for item in hashes.hscan_match(con, "my_hash", "key_*"):
    ...
```

## Cluster routing

```python
from rediscmd.cluster_routing import RoutingInfo, RoutingKind, get_hashtag, crc16
from rediscmd.cmd import cmd

RoutingInfo.for_key(b"user:{42}:name")      # RoutingInfo(kind=RoutingKind.SLOT, slot=...)
RoutingInfo.for_routable(cmd("FLUSHALL"))   # RoutingInfo(kind=RoutingKind.ALL_MASTERS)
RoutingInfo.for_routable([b"SET", b"k"])    # slot of b"k"
get_hashtag(b"foo{bar}baz")                 # b"bar"
```

`for_routable` takes either a `Cmd` or a list of byte-string arguments. It
returns `None` for commands that cannot be routed to a single place, such
as `SCAN` or `BITOP`. The slot is `crc16(key) % SLOT_SIZE`, which is
CRC-16/XMODEM over 16384 slots. When a key holds a non-empty `{hashtag}`,
only the hashtag is hashed. `Slot` is a record holding a slot range, its
master and its replicas.

## What this package does not do

- It does not open network connections or speak to a server by itself.
- It does not parse replies or convert them to Python types. `query`
  returns whatever the connection returns.
- It has no pipelines, transactions, pub/sub, scripting or cluster client.
  `cluster_routing` only computes where a command would go.

## Running the tests

```
pytest
```