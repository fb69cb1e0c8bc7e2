from .command import command

COMMANDS = [
    command("exists", "Check if keys exist."),
    command("del", "Delete one or more keys."),
    command("type", "Determine the type stored at key."),
    command("keys", "Find all keys matching the given pattern."),
    command("randomkey", "Return a random key from the selected database."),
    command("rename", "Rename a key."),
    command("renamenx", "Rename a key, only if the new key does not exist."),
    command("expire", "Set a key's time to live in seconds."),
    command("ttl", "Get the time to live for a key in seconds."),
    command("persist", "Remove the expiration from a key."),
    command("move", "Move a key to another database."),
]
