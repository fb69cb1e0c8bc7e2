from .command import command

COMMANDS = [
    command("get", "Retrieve the string value of a key."),
    command("set", "Set the string value of a key."),
    command("getset", "Set the string value of a key and return its old value."),
    command("setnx", "Set the value of a key only if it does not exist. Returns True if it was set.", "boolean"),
    command("mget", "Get the values of all the given keys."),
    command("mset", "Set multiple keys to multiple values: key, value, key, value, ..."),
    command("incr", "Increment the integer value of a key by one."),
    command("incrby", "Increment the integer value of a key by the given amount."),
    command("decr", "Decrement the integer value of a key by one."),
    command("decrby", "Decrement the integer value of a key by the given amount."),
    command("append", "Append a value to the string stored at key."),
    command("strlen", "Get the length of the string value stored at key."),
]
