import pytest

from rediscmd import lists
from rediscmd.lists import Direction, LposOptions


def args(command):
    return list(command.args_iter())


def test_rpush_list():
    assert args(lists.rpush("my_list", [1, 2, 3, 4])) == [b"RPUSH", b"my_list", b"1", b"2", b"3", b"4"]


def test_lpop_default_and_count():
    assert args(lists.lpop("my_list", None)) == [b"LPOP", b"my_list"]
    assert args(lists.lpop("my_list", 10)) == [b"LPOP", b"my_list", b"10"]


@pytest.mark.parametrize("func", [lists.lpop, lists.rpop])
def test_pop_rejects_zero_count(func):
    with pytest.raises(ValueError):
        func("my_list", 0)


def test_rpop_count():
    assert args(lists.rpop("k", 3)) == [b"RPOP", b"k", b"3"]


def test_lrange_and_lset():
    assert args(lists.lrange("my_list", 0, 2)) == [b"LRANGE", b"my_list", b"0", b"2"]
    assert args(lists.lset("my_list", 0, 4)) == [b"LSET", b"my_list", b"0", b"4"]


def test_llen_packed():
    assert lists.llen("k").get_packed_command() == b"*2\r\n$4\r\nLLEN\r\n$1\r\nk\r\n"


def test_direction_args():
    assert Direction.LEFT.redis_args() == [b"LEFT"]
    assert Direction.RIGHT.redis_args() == [b"RIGHT"]


def test_lmove_and_blmove():
    assert args(lists.lmove("a", "b", Direction.LEFT, Direction.RIGHT)) == [
        b"LMOVE", b"a", b"b", b"LEFT", b"RIGHT"
    ]
    assert args(lists.blmove("a", "b", Direction.RIGHT, Direction.LEFT, 5)) == [
        b"BLMOVE", b"a", b"b", b"RIGHT", b"LEFT", b"5"
    ]


def test_lmpop_and_blmpop():
    assert args(lists.lmpop(2, ["a", "b"], Direction.LEFT, 3)) == [
        b"LMPOP", b"2", b"a", b"b", b"LEFT", b"COUNT", b"3"
    ]
    assert args(lists.blmpop(1, 1, "a", Direction.RIGHT, 2)) == [
        b"BLMPOP", b"1", b"1", b"a", b"RIGHT", b"COUNT", b"2"
    ]


def test_lpos_options_order():
    opts = LposOptions(count=2, rank=-1, maxlen=100)
    assert opts.redis_args() == [b"COUNT", b"2", b"RANK", b"-1", b"MAXLEN", b"100"]
    assert args(lists.lpos("k", "v", opts)) == [
        b"LPOS", b"k", b"v", b"COUNT", b"2", b"RANK", b"-1", b"MAXLEN", b"100"
    ]


def test_lpos_default_options_empty():
    assert LposOptions().redis_args() == []
    assert args(lists.lpos("k", "v", LposOptions())) == [b"LPOS", b"k", b"v"]


def test_linsert():
    assert args(lists.linsert_before("k", "p", "v")) == [b"LINSERT", b"k", b"BEFORE", b"p", b"v"]
    assert args(lists.linsert_after("k", "p", "v")) == [b"LINSERT", b"k", b"AFTER", b"p", b"v"]


@pytest.mark.parametrize(
    "command, expected",
    [
        (lists.blpop("k", 0), [b"BLPOP", b"k", b"0"]),
        (lists.brpop("k", 1), [b"BRPOP", b"k", b"1"]),
        (lists.brpoplpush("a", "b", 2), [b"BRPOPLPUSH", b"a", b"b", b"2"]),
        (lists.lindex("k", -1), [b"LINDEX", b"k", b"-1"]),
        (lists.lpush("k", "v"), [b"LPUSH", b"k", b"v"]),
        (lists.lpush_exists("k", "v"), [b"LPUSHX", b"k", b"v"]),
        (lists.lrem("k", -2, "v"), [b"LREM", b"k", b"-2", b"v"]),
        (lists.ltrim("k", 0, 9), [b"LTRIM", b"k", b"0", b"9"]),
        (lists.rpoplpush("a", "b"), [b"RPOPLPUSH", b"a", b"b"]),
        (lists.rpush_exists("k", "v"), [b"RPUSHX", b"k", b"v"]),
    ],
)
def test_simple_commands(command, expected):
    assert args(command) == expected