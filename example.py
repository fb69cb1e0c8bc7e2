import logging

import tinyredis

logging.basicConfig(level=logging.DEBUG)

# Initialize connection (host/port from REDIS_HOST / REDIS_PORT when set)
r = tinyredis.Redis(config=tinyredis.ClientConfig.from_env())

# Select DB and perform operations
r.select(15)
r.set("my_key", "Hello from Python!")
print(r.get('my_key'))
print(r.delete('my_key'))
print(r.get('my_key'))

# Set operations
r.sadd("my_set", "member0", "member1")
print(f"Sorted: {r.sort('my_set', tinyredis.SortOptions(lexicographically=True))}")

# Server information
info = r.info()
print(f"Server version: {info.get('redis_version')}, clients: {info.get('connected_clients')}")

r.delete("my_set")
r.quit()
