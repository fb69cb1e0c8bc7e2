import logging
from dataclasses import dataclass

from .exceptions import ConnectionClosedError, ProtocolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplyError:
    """An error reply sent by the server, kept as a value."""
    message: str


def _to_bytes(arg):
    if isinstance(arg, (bytes, bytearray, memoryview)):
        return bytes(arg)
    return str(arg).encode('utf-8')


def encode_command(name, args=()):
    """Frame a command as a RESP multibulk request."""
    parts = [_to_bytes(name)]
    parts.extend(_to_bytes(arg) for arg in args)
    # RESP requires length in BYTES, not characters.
    out = [f"*{len(parts)}\r\n".encode('utf-8')]
    for b_arg in parts:
        out.append(f"${len(b_arg)}\r\n".encode('utf-8'))
        out.append(b_arg + b"\r\n")
    return b"".join(out)


def _parse_int(line, what):
    try:
        return int(line, 10)
    except ValueError:
        raise ProtocolError(f"Invalid {what}: {line!r}") from None


def _status(reader):
    line = reader.read_line()
    return True if line == 'OK' else line


def _error(reader):
    line = reader.read_line()
    if line.startswith('ERR '):
        line = line[4:]
    return ReplyError(line)


def _integer(reader):
    return _parse_int(reader.read_line(), 'integer reply')


def _bulk(reader):
    length = _parse_int(reader.read_line(), 'bulk length')
    if length == -1:
        return None
    if length < 0:
        raise ProtocolError(f"Invalid bulk length: {length}")
    data = reader.read_exact(length)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        # Binary value; the payload and its CRLF are consumed, so the stream is in sync.
        return data


def _multibulk(reader):
    count = _parse_int(reader.read_line(), 'multibulk count')
    if count == -1:
        return None
    if count < 0:
        raise ProtocolError(f"Invalid multibulk count: {count}")
    return [_read_reply(reader) for _ in range(count)]


_HANDLERS = {
    b'+': _status,
    b'-': _error,
    b':': _integer,
    b'$': _bulk,
    b'*': _multibulk,
}


def _read_reply(reader, top_level=False):
    prefix = reader.read_byte()
    if not prefix:
        # Nothing read yet means the server closed an idle connection.
        if top_level:
            raise ConnectionClosedError("Connection closed by server")
        raise ProtocolError("Stream ended inside a multibulk reply")
    handler = _HANDLERS.get(prefix)
    if handler is None:
        raise ProtocolError(f"Unknown RESP type received: {prefix!r}")
    return handler(reader)


def decode_reply(reader):
    """Read exactly one reply from a ReplyReader and return it as a Python value.

    Status ``OK`` becomes True, integers become int, bulk strings are decoded
    as UTF-8 (raw bytes when they are not valid UTF-8), nil bulk strings and
    nil arrays become None, and error replies come back as ReplyError
    instances rather than being raised.
    """
    reply = _read_reply(reader, top_level=True)
    logger.debug("Decoded %s reply", type(reply).__name__)
    return reply
