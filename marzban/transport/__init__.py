from marzban.transport.base import Transport, parse_body, raise_for_status
from marzban.transport.httpx_async import HttpxAsyncTransport
from marzban.transport.httpx_sync import HttpxSyncTransport

__all__ = ["Transport", "HttpxAsyncTransport", "HttpxSyncTransport", "parse_body", "raise_for_status"]
