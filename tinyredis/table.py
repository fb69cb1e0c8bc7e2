from . import hashes, keys, lists, server, sets, strings, zsets
from .command import build_table

COMMAND_TABLE = build_table(
    strings.COMMANDS,
    keys.COMMANDS,
    lists.COMMANDS,
    sets.COMMANDS,
    zsets.COMMANDS,
    hashes.COMMANDS,
    server.COMMANDS,
)

# Names that cannot be Python attributes.
ALIASES = {
    "delete": "del",
}


def lookup(name):
    name = str(name).lower()
    return COMMAND_TABLE.get(ALIASES.get(name, name))
