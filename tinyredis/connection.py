import logging
import socket

from .exceptions import IllegalStateError, TransportError
from .protocol import decode_reply, encode_command
from .reader import ReplyReader
from .config import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)


class Connection:
    """One TCP connection to a Redis server plus its read stream.

    The selected database index lives here because the server ties it to the
    socket: every connect() starts again at database 0.
    """

    def __init__(self, host=DEFAULT_HOST, port=DEFAULT_PORT, socket_timeout=None):
        self.host = host
        self.port = port
        self.socket_timeout = socket_timeout
        self.sock = None
        self.file = None
        self.reader = None
        self.db = 0

    def __repr__(self):
        state = 'open' if self.is_open else 'closed'
        return f"<Connection {self.host}:{self.port} db={self.db} {state}>"

    @property
    def is_open(self):
        return self.sock is not None

    def connect(self):
        """Open a fresh socket, closing the current one first if there is one."""
        if self.is_open:
            self.close()
        logger.debug("Connecting to %s:%s", self.host, self.port)
        try:
            self.sock = socket.create_connection((self.host, self.port), timeout=self.socket_timeout)
        except OSError as e:
            raise TransportError(f"Could not connect to {self.host}:{self.port}: {e}") from e
        self.file = self.sock.makefile('rb')
        self.reader = ReplyReader(self.file)
        self.db = 0

    def send(self, payload):
        if not self.is_open:
            raise IllegalStateError("Connection is not open")
        try:
            self.sock.sendall(payload)
        except OSError as e:
            raise TransportError(f"Error writing to {self.host}:{self.port}: {e}") from e

    def read_reply(self):
        if not self.is_open:
            raise IllegalStateError("Connection is not open")
        try:
            return decode_reply(self.reader)
        except OSError as e:
            raise TransportError(f"Error reading from {self.host}:{self.port}: {e}") from e

    def close(self):
        """Release the socket. Safe to call on a closed connection."""
        if self.sock is None:
            return
        logger.debug("Closing connection to %s:%s", self.host, self.port)
        for resource in (self.file, self.sock):
            if resource is None:
                continue
            try:
                resource.close()
            except OSError as e:
                logger.debug("Ignoring error while closing %r: %s", resource, e)
        self.sock = None
        self.file = None
        self.reader = None

    def quit(self):
        """Send QUIT without waiting for the reply, then close."""
        if not self.is_open:
            raise IllegalStateError("Connection is not open")
        try:
            self.sock.sendall(encode_command('QUIT'))
        except OSError as e:
            logger.debug("QUIT not delivered: %s", e)
        self.close()

    def __enter__(self):
        if not self.is_open:
            self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
