from .command import command

COMMANDS = [
    command("rpush", "Append one or multiple values to a list."),
    command("lpush", "Prepend one or multiple values to a list."),
    command("llen", "Get the length of a list."),
    command("lrange", "Get a range of elements from a list."),
    command("ltrim", "Trim a list to the specified range."),
    command("lindex", "Get an element from a list by its index."),
    command("lset", "Set the value of an element in a list by its index."),
    command("lrem", "Remove elements from a list."),
    command("lpop", "Remove and get the first element in a list."),
    command("rpop", "Remove and get the last element in a list."),
]
