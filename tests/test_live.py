"""Integration tests against a running Redis server.

The server is taken from REDIS_HOST / REDIS_PORT (default 127.0.0.1:6379).
Databases 14 and 15 are flushed before and after every test. The whole module
is skipped when no server answers.
"""
import pytest

from tinyredis import ClientConfig, CommandError, Redis, TransportError

TEST_DB_NUMBER = 15
TEST_DB_NUMBER_FOR_MOVE = 14


@pytest.fixture
def redis():
    r = Redis(config=ClientConfig.from_env())
    try:
        r.connect()
    except TransportError as e:
        pytest.skip(f"no Redis server available: {e}")

    assert r.select(TEST_DB_NUMBER_FOR_MOVE) is True
    assert r.flushdb() is True
    assert r.select(TEST_DB_NUMBER) is True
    assert r.flushdb() is True
    yield r
    r.select(TEST_DB_NUMBER_FOR_MOVE)
    r.flushdb()
    r.select(TEST_DB_NUMBER)
    assert r.flushdb() is True
    assert r.dbsize() == 0
    r.quit()


def test_select(redis):
    assert redis.set('foo', 'bar') is True
    assert redis.select(TEST_DB_NUMBER_FOR_MOVE) is True
    assert redis.dbsize() == 0
    assert redis.select(TEST_DB_NUMBER) is True
    assert redis.dbsize() == 1
    assert redis.db == TEST_DB_NUMBER


def test_setnx(redis):
    assert redis.set('foo', 'bar') is True
    assert redis.setnx('foo', 'quux') is False
    assert redis.setnx('boo', 'apple') is True


def test_get(redis):
    assert redis.set('foo', 'bar') is True
    assert redis.get('foo') == 'bar'
    assert redis.get('notthere') is None


def test_mget(redis):
    assert redis.set('foo', 'bar') is True
    assert redis.set('boo', 'apple') is True
    assert redis.mget('foo', 'boo', 'notthere') == ['bar', 'apple', None]


def test_getset(redis):
    assert redis.set('foo', 'bar') is True
    assert redis.getset('foo', 'fuzz') == 'bar'
    assert redis.get('foo') == 'fuzz'


def test_incr(redis):
    assert redis.incr('counter') == 1
    assert redis.incr('counter') == 2
    assert redis.incrby('counter', 10) == 12


def test_move(redis):
    assert redis.set('foo', 'bar') is True
    assert redis.move('foo', TEST_DB_NUMBER_FOR_MOVE) == 1
    assert redis.exists('foo') == 0


def test_zset_commands(redis):
    assert redis.zadd('foo', 2, 'bar') is True
    assert redis.zadd('foo', 3, 'bar') is False
    assert float(redis.zscore('foo', 'bar')) == 3
    assert redis.zcard('foo') == 1
    assert redis.zadd('foo', 1, 'abc') is True
    assert redis.zrem('foo', 'abc') is True
    assert float(redis.zincrby('foo', 1, 'bar')) == 4


def test_info(redis):
    info = redis.info()
    assert 'redis_version' in info
    assert isinstance(info['connected_clients'], int)
    assert isinstance(info['uptime_in_seconds'], int)


def test_lastsave(redis):
    assert isinstance(redis.lastsave(), int)


def test_sadd_and_sismember(redis):
    assert redis.sadd('set0', 'member0') is True
    assert redis.sadd('set0', 'member0') is False
    assert redis.sismember('set0', 'member0') is True
    assert redis.sismember('set0', 'member1') is False


def test_sort(redis):
    for i in range(4):
        assert redis.sadd('set0', f'member{i}') is True

    assert len(redis.sort('set0', {'lexicographically': True, 'ascending': True})) == 4
    assert len(redis.sort('set0', {'limit': (0, 2), 'lexicographically': True})) == 2

    lex_sorted = redis.sort('set0', {'lexicographically': True})
    assert lex_sorted[0] == 'member3'
    assert lex_sorted[3] == 'member0'


def test_charset(redis):
    assert redis.set('utftest', 'b£a') is True
    assert redis.get('utftest') == 'b£a'
    assert redis.strlen('utftest') == 4


def test_command_error_leaves_connection_usable(redis):
    redis.sadd('set0', 'member0')
    with pytest.raises(CommandError):
        redis.incr('set0')
    assert redis.ping() == 'PONG'
