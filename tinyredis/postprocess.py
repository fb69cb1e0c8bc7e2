import re

from .table import COMMAND_TABLE

_INT_RE = re.compile(r'^\s*\d+\s*$')
_FLOAT_RE = re.compile(r'^\s*\d+\.(\d+)?\s*$')


def maybe_convert_to_number(value):
    """Turn '42' into 42 and '2.5' into 2.5; anything else comes back unchanged."""
    if not isinstance(value, str):
        return value
    if _INT_RE.match(value):
        return int(value)
    if _FLOAT_RE.match(value):
        return float(value)
    return value


def parse_info(text):
    """Parse an INFO blob into a dict. Section headers and blank lines are skipped."""
    if text is None:
        return {}
    info = {}
    for line in text.split('\r\n'):
        parts = line.split(':')
        if len(parts) == 2:
            info[parts[0]] = maybe_convert_to_number(parts[1])
    return info


def to_boolean(reply):
    if reply is None:
        return None
    return reply != 0


_TRANSFORMS = {
    'info': parse_info,
    'number': maybe_convert_to_number,
    'boolean': to_boolean,
}


def post_process(command_name, reply):
    """Apply the reply transform registered for a command in the command table."""
    info = COMMAND_TABLE.get(command_name.lower())
    if info is None or info.post_process is None:
        return reply
    return _TRANSFORMS[info.post_process](reply)
