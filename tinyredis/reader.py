from .exceptions import ProtocolError

CRLF = b"\r\n"
MAX_LINE_LENGTH = 64 * 1024


class ReplyReader:
    """Pulls CRLF-terminated header lines and sized payloads off a binary stream.

    The stream is any blocking file object opened in binary mode, usually the
    result of ``sock.makefile('rb')``. Header lines are ASCII, payloads are raw
    bytes that may themselves contain CR or LF, so the two are read separately.
    """

    def __init__(self, stream, max_line_length=MAX_LINE_LENGTH):
        self.stream = stream
        self.max_line_length = max_line_length

    def read_byte(self):
        """Return the next byte, or b'' at end of stream."""
        return self.stream.read(1)

    def read_line(self):
        buf = bytearray()
        while True:
            # readline() stops at LF; a lone LF without CR is part of the line.
            remaining = self.max_line_length + 2 - len(buf)
            if remaining <= 0:
                raise ProtocolError(f"Reply line longer than {self.max_line_length} bytes")
            chunk = self.stream.readline(remaining)
            buf.extend(chunk)
            if buf.endswith(CRLF):
                break
            if not chunk or (len(chunk) < remaining and not chunk.endswith(b"\n")):
                raise ProtocolError("Stream ended before CRLF")
        try:
            return bytes(buf[:-2]).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProtocolError(f"Reply line is not valid UTF-8: {e}") from e

    def read_exact(self, n):
        data = self.stream.read(n) if n else b""
        if len(data) != n:
            raise ProtocolError(f"Expected {n} payload bytes, got {len(data)}")
        terminator = self.stream.read(2)
        if terminator != CRLF:
            raise ProtocolError(f"Bulk payload not followed by CRLF: {terminator!r}")
        return data
