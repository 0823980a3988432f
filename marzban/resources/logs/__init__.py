from marzban.resources.logs.async_logs import AsyncLogs
from marzban.resources.logs.logs import Logs

__all__ = ["Logs", "AsyncLogs"]
