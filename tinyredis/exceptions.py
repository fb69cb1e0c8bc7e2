class RedisError(Exception):
    """Base class for every error raised by tinyredis."""


class UnsupportedCommandError(RedisError):
    """The command name is not in the command table. Raised before any I/O."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unsupported command: {name}")


class ProtocolError(RedisError):
    """The server sent bytes that are not a valid RESP reply.

    The stream is out of sync after this, so the connection is closed and the
    command is never retried.
    """


class TransportError(RedisError):
    """Socket level failure while writing a command or reading its reply."""


class ConnectionClosedError(TransportError):
    """The server closed the socket before a reply started."""


class CommandError(RedisError):
    """The server answered the command with an error reply."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class IllegalStateError(RedisError):
    """An operation that needs an open connection was called without one."""
