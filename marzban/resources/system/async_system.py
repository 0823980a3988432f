from typing import Any, Mapping

from marzban.resources.base import BaseAsyncResource
from marzban.resources.system.system_core import _SystemCore


class AsyncSystem(BaseAsyncResource, _SystemCore):
    async def get_system_stats(self) -> dict[str, Any]:
        resp = await self._t.arequest("GET", self.ENDPOINT)
        return self._get_json(resp)

    async def get_inbounds(self) -> dict[str, list[dict[str, Any]]]:
        resp = await self._t.arequest("GET", self.INBOUNDS_ENDPOINT)
        return self._get_json(resp)

    async def get_hosts(self) -> dict[str, list[dict[str, Any]]]:
        resp = await self._t.arequest("GET", self.HOSTS_ENDPOINT)
        return self._get_json(resp)

    async def modify_hosts(self, hosts: Mapping[str, Any]) -> dict[str, list[dict[str, Any]]]:
        resp = await self._t.arequest("PUT", self.HOSTS_ENDPOINT, json=dict(hosts))
        return self._get_json(resp)
