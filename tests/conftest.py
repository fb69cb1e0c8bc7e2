import io

import pytest


class FailingStream:
    """Read stream whose every read raises the given socket error."""

    def __init__(self, error):
        self.error = error

    def read(self, size=-1):
        raise self.error

    def readline(self, size=-1):
        raise self.error

    def close(self):
        pass


class FakeSocket:
    """Stands in for a connected socket: records what is sent, replays canned reply bytes."""

    def __init__(self, replies=b"", fail_send=None, fail_read=None):
        self.stream = FailingStream(fail_read) if fail_read is not None else io.BytesIO(replies)
        self.fail_send = fail_send
        self.sent = bytearray()
        self.closed = False

    def sendall(self, data):
        if self.fail_send is not None:
            raise self.fail_send
        self.sent.extend(data)

    def makefile(self, mode):
        assert mode == 'rb'
        return self.stream

    def close(self):
        self.closed = True


class FakeNetwork:
    """Hands out queued FakeSockets from socket.create_connection."""

    def __init__(self):
        self.pending = []
        self.sockets = []
        self.addresses = []

    def add(self, replies=b"", fail_send=None, fail_read=None):
        sock = FakeSocket(replies, fail_send, fail_read)
        self.pending.append(sock)
        return sock

    def create_connection(self, address, timeout=None):
        self.addresses.append((address, timeout))
        if not self.pending:
            raise ConnectionRefusedError(f"nothing listening on {address}")
        sock = self.pending.pop(0)
        self.sockets.append(sock)
        return sock


@pytest.fixture
def network(monkeypatch):
    net = FakeNetwork()
    monkeypatch.setattr('tinyredis.connection.socket.create_connection', net.create_connection)
    return net
