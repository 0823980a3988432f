from typing import Any, Mapping

from marzban.resources.base import BaseAsyncResource
from marzban.resources.core.core_core import _CoreCore


class AsyncCore(BaseAsyncResource, _CoreCore):
    async def get_core_stats(self) -> dict[str, Any]:
        resp = await self._t.arequest("GET", self.ENDPOINT)
        return self._get_json(resp)

    async def restart_core(self) -> Any:
        resp = await self._t.arequest("POST", self.RESTART_ENDPOINT)
        return self._get_json(resp)

    async def get_core_config(self) -> dict[str, Any]:
        resp = await self._t.arequest("GET", self.CONFIG_ENDPOINT)
        return self._get_json(resp)

    async def modify_core_config(self, config: Mapping[str, Any]) -> dict[str, Any]:
        resp = await self._t.arequest("PUT", self.CONFIG_ENDPOINT, json=dict(config))
        return self._get_json(resp)
