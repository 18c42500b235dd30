import pytest

from rediscmd import streams
from rediscmd.cmd import pack_command


class _Maxlen:
    def __init__(self, approx, count):
        self.approx = approx
        self.count = count

    def redis_args(self):
        return [b"MAXLEN", b"~" if self.approx else b"=", str(self.count).encode()]


def _args(command):
    return list(command.args_iter())


def test_xlen_wire_bytes():
    assert streams.xlen("k").get_packed_command() == b"*2\r\n$4\r\nXLEN\r\n$1\r\nk\r\n"


def test_xack():
    assert _args(streams.xack("s", "g", ["1-0", "2-0"])) == [
        b"XACK", b"s", b"g", b"1-0", b"2-0"
    ]


def test_xadd_items_flattened():
    assert _args(streams.xadd("s", "*", [("f1", "v1"), ("f2", 2)])) == [
        b"XADD", b"s", b"*", b"f1", b"v1", b"f2", b"2"
    ]


def test_xadd_map_uses_mapping_order():
    assert _args(streams.xadd_map("s", "*", {"a": 1, "b": "x"})) == [
        b"XADD", b"s", b"*", b"a", b"1", b"b", b"x"
    ]


def test_xadd_maxlen():
    command = streams.xadd_maxlen("s", _Maxlen(True, 10), "*", [("f", "v")])
    assert _args(command) == [b"XADD", b"s", b"MAXLEN", b"~", b"10", b"*", b"f", b"v"]


def test_xadd_maxlen_map():
    command = streams.xadd_maxlen_map("s", _Maxlen(False, 5), "*", {"f": "v"})
    assert _args(command) == [b"XADD", b"s", b"MAXLEN", b"=", b"5", b"*", b"f", b"v"]


def test_xclaim_and_options():
    plain = streams.xclaim("k1", "g1", "c1", 10, ["0"])
    assert _args(plain) == [b"XCLAIM", b"k1", b"g1", b"c1", b"10", b"0"]
    with_options = streams.xclaim_options("k1", "g1", "c1", 10, ["0"], ["FORCE", "JUSTID"])
    assert _args(with_options) == _args(plain) + [b"FORCE", b"JUSTID"]


def test_xdel():
    assert _args(streams.xdel("s", ["1-0"])) == [b"XDEL", b"s", b"1-0"]


@pytest.mark.parametrize(
    "func, expected",
    [
        (streams.xgroup_create, [b"XGROUP", b"CREATE", b"s", b"g", b"$"]),
        (streams.xgroup_create_mkstream, [b"XGROUP", b"CREATE", b"s", b"g", b"$", b"MKSTREAM"]),
        (streams.xgroup_setid, [b"XGROUP", b"SETID", b"s", b"g", b"$"]),
    ],
)
def test_xgroup_with_id(func, expected):
    assert _args(func("s", "g", "$")) == expected


def test_xgroup_destroy_and_delconsumer():
    assert _args(streams.xgroup_destroy("s", "g")) == [b"XGROUP", b"DESTROY", b"s", b"g"]
    assert _args(streams.xgroup_delconsumer("s", "g", "c")) == [
        b"XGROUP", b"DELCONSUMER", b"s", b"g", b"c"
    ]


def test_xinfo():
    assert _args(streams.xinfo_consumers("s", "g")) == [b"XINFO", b"CONSUMERS", b"s", b"g"]
    assert _args(streams.xinfo_groups("s")) == [b"XINFO", b"GROUPS", b"s"]
    assert _args(streams.xinfo_stream("s")) == [b"XINFO", b"STREAM", b"s"]


def test_xpending_variants():
    assert _args(streams.xpending("s", "g")) == [b"XPENDING", b"s", b"g"]
    assert _args(streams.xpending_count("s", "g", "-", "+", 10)) == [
        b"XPENDING", b"s", b"g", b"-", b"+", b"10"
    ]
    assert _args(streams.xpending_consumer_count("s", "g", "-", "+", 10, "c")) == [
        b"XPENDING", b"s", b"g", b"-", b"+", b"10", b"c"
    ]


def test_xrange_variants():
    assert _args(streams.xrange("s", "1-0", "2-0")) == [b"XRANGE", b"s", b"1-0", b"2-0"]
    assert _args(streams.xrange_all("s")) == [b"XRANGE", b"s", b"-", b"+"]
    assert _args(streams.xrange_count("s", "-", "+", 3)) == [
        b"XRANGE", b"s", b"-", b"+", b"COUNT", b"3"
    ]


def test_xrevrange_variants():
    assert _args(streams.xrevrange("s", "+", "-")) == [b"XREVRANGE", b"s", b"+", b"-"]
    assert _args(streams.xrevrange_all("s")) == _args(streams.xrevrange("s", "+", "-"))
    assert _args(streams.xrevrange_count("s", "+", "-", 2)) == [
        b"XREVRANGE", b"s", b"+", b"-", b"COUNT", b"2"
    ]


def test_xread_keys_then_ids():
    command = streams.xread(["k1", "k2"], ["0", "0"])
    assert _args(command) == [b"XREAD", b"STREAMS", b"k1", b"k2", b"0", b"0"]
    assert command.get_packed_command() == pack_command(_args(command))


def test_xtrim():
    assert _args(streams.xtrim("s", _Maxlen(False, 100))) == [
        b"XTRIM", b"s", b"MAXLEN", b"=", b"100"
    ]


def test_unsupported_argument_type_raises():
    with pytest.raises(TypeError):
        streams.xlen(object())