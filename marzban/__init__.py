"""Entrypoint for the Marzban SDK.

Will expose Client, AsyncClient and __version__
"""

from .client import Client
from .async_client import AsyncClient
from .config import Config
from .version import VERSION as __version__
from .errors import (
    AuthenticationError,
    ConfigurationError,
    MarzbanError,
    PreconditionError,
    RemoteError,
    TimeoutError,
    ValidationError,
)


__all__ = [
    "Client",
    "AsyncClient",
    "Config",
    "__version__",
    "MarzbanError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "TimeoutError",
    "RemoteError",
    "PreconditionError",
]
