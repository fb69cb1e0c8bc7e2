import logging

from .config import ClientConfig
from .connection import Connection
from .exceptions import CommandError, ProtocolError, TransportError, UnsupportedCommandError
from .postprocess import post_process
from .protocol import ReplyError, encode_command
from .sort import sort_args
from .table import lookup

logger = logging.getLogger(__name__)


class Redis:
    """Synchronous Redis client over a single connection.

    Every command in the command table is available as a method::

        r = Redis()
        r.set('foo', 'bar')      # True
        r.get('foo')             # 'bar'
        r.sadd('s', 'member0')   # True

    The connection is opened on the first command. If writing the command or
    reading its reply fails at the socket level, the client reconnects and
    sends the command once more; a second failure is raised to the caller.
    """

    def __init__(self, host=None, port=None, socket_timeout=None, config=None):
        config = config or ClientConfig()
        self.connection = Connection(
            host=host if host is not None else config.host,
            port=port if port is not None else config.port,
            socket_timeout=socket_timeout if socket_timeout is not None else config.socket_timeout,
        )

    def __repr__(self):
        return f"<Redis {self.connection!r}>"

    def __getattr__(self, name):
        info = lookup(name)
        if info is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        def run(*args):
            return self.execute(info.name, *args)

        run.__name__ = info.name
        run.__doc__ = info.doc
        return run

    @property
    def db(self):
        return self.connection.db

    def connect(self):
        self.connection.connect()
        return self

    def close(self):
        self.connection.close()

    def quit(self):
        """Send QUIT and close the connection. Fails if no connection is open."""
        self.connection.quit()

    def sort(self, key, options=None):
        """Sort a list, set or sorted set. See SortOptions for the options."""
        return self.execute('sort', *sort_args(key, options))

    def execute(self, name, *args):
        """Send one command and return its post-processed reply."""
        info = lookup(name)
        if info is None:
            raise UnsupportedCommandError(name)
        if info.name == 'quit':
            return self.quit()

        payload = encode_command(info.name.upper(), args)
        logger.debug("> %s (%d args)", info.name, len(args))

        if not self.connection.is_open:
            self.connection.connect()
        try:
            reply = self._roundtrip(payload)
        except TransportError as e:
            logger.warning("%s failed (%s), reconnecting and retrying once", info.name, e)
            try:
                self.connection.connect()
                reply = self._roundtrip(payload)
            except TransportError:
                self.connection.close()
                raise

        if isinstance(reply, ReplyError):
            raise CommandError(reply.message)
        if info.name == 'select':
            self.connection.db = int(args[0])
        return post_process(info.name, reply)

    def _roundtrip(self, payload):
        try:
            self.connection.send(payload)
            return self.connection.read_reply()
        except ProtocolError:
            logger.error("Protocol error from %s:%s, closing connection", self.connection.host, self.connection.port)
            self.connection.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
