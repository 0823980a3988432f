from marzban.resources.core.async_core import AsyncCore
from marzban.resources.core.core import Core

__all__ = ["Core", "AsyncCore"]
