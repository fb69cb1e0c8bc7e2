from .command import command

COMMANDS = [
    command("zadd", "Add a member to a sorted set: key, score, member. Returns True if the member is new.", "boolean"),
    command("zrem", "Remove a member from a sorted set. Returns True if it was there.", "boolean"),
    command("zincrby", "Increment the score of a member in a sorted set."),
    command("zscore", "Get the score associated with the given member in a sorted set."),
    command("zcard", "Get the number of members in a sorted set."),
    command("zrange", "Return a range of members in a sorted set, by index."),
    command("zrevrange", "Return a range of members in a sorted set, by index, with scores ordered high to low."),
    command("zrangebyscore", "Return a range of members in a sorted set, by score."),
]
