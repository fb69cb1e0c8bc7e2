from .command import command

COMMANDS = [
    command("hset", "Set the string value of a hash field."),
    command("hget", "Get the value of a hash field."),
    command("hdel", "Delete one or more hash fields."),
    command("hgetall", "Get all fields and values in a hash."),
    command("hincrby", "Increment the integer value of a hash field by the given amount."),
    command("hexists", "Check if a hash field exists."),
    command("hlen", "Get the number of fields in a hash."),
    command("hkeys", "Get all field names in a hash."),
    command("hvals", "Get all values in a hash."),
    command("hmget", "Get the values of all the given hash fields."),
]
