from .command import command

COMMANDS = [
    command("auth", "Authenticate to the server."),
    command("ping", "Ping the server."),
    command("echo", "Echo the given string."),
    command("select", "Change the selected database for the current connection."),
    command("dbsize", "Return the number of keys in the database."),
    command("flushdb", "Remove all keys from the current database."),
    command("flushall", "Remove all keys from all databases."),
    command("save", "Synchronously save the database to disk."),
    command("bgsave", "Asynchronously save the database to disk."),
    command("lastsave", "Get the UNIX timestamp of the last successful save.", "number"),
    command("shutdown", "Save the data and shut the server down."),
    command("quit", "Ask the server to close the connection, then close it locally."),
    command("info", "Get server information and statistics as a dict.", "info"),
    command("sort", "Sort the elements in a list, set or sorted set."),
]
