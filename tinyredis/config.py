import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 6379


@dataclass
class ClientConfig:
    """Where to connect and how long a socket operation may block.

    socket_timeout=None keeps the platform's blocking default.
    """
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    socket_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from REDIS_HOST, REDIS_PORT and REDIS_SOCKET_TIMEOUT."""
        env = os.environ if environ is None else environ
        timeout = env.get('REDIS_SOCKET_TIMEOUT')
        return cls(
            host=env.get('REDIS_HOST', DEFAULT_HOST),
            port=int(env.get('REDIS_PORT', DEFAULT_PORT)),
            socket_timeout=float(timeout) if timeout else None,
        )
