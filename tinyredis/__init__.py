from .client import Redis
from .config import ClientConfig
from .connection import Connection
from .exceptions import RedisError, UnsupportedCommandError, ProtocolError, TransportError, ConnectionClosedError, CommandError, IllegalStateError
from .protocol import ReplyError, encode_command, decode_reply
from .reader import ReplyReader
from .sort import SortOptions
from .table import COMMAND_TABLE

__version__ = "0.1.0"
