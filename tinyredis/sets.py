from .command import command

COMMANDS = [
    command("sadd", "Add a member to a set. Returns True if it was not already a member.", "boolean"),
    command("srem", "Remove one or more members from a set."),
    command("smove", "Move a member from one set to another."),
    command("sismember", "Determine if a given value is a member of a set.", "boolean"),
    command("scard", "Get the number of members in a set."),
    command("smembers", "Get all the members in a set."),
    command("srandmember", "Get one or multiple random members from a set."),
    command("sinter", "Intersect multiple sets."),
    command("sinterstore", "Intersect multiple sets and store the result in a key."),
    command("sunion", "Add multiple sets."),
    command("sunionstore", "Add multiple sets and store the result in a key."),
    command("sdiff", "Subtract multiple sets."),
    command("sdiffstore", "Subtract multiple sets and store the result in a key."),
]
