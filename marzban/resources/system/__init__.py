from marzban.resources.system.async_system import AsyncSystem
from marzban.resources.system.system import System

__all__ = ["System", "AsyncSystem"]
