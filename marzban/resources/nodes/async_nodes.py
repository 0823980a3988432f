from typing import Any, Mapping

from marzban.models import NodeCreate, NodeModify
from marzban.resources.base import BaseAsyncResource, path_segment
from marzban.resources.nodes.nodes_core import _NodesCore


class AsyncNodes(BaseAsyncResource, _NodesCore):
    """Async nodes resource."""

    async def get_node_settings(self) -> dict[str, Any]:
        resp = await self._t.arequest("GET", self.SETTINGS_ENDPOINT)
        return self._get_json(resp)

    async def add_node(self, data: Mapping[str, Any] | NodeCreate) -> dict[str, Any]:
        """Register a node. ``name`` and ``address`` are required."""
        resp = await self._t.arequest("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    async def get_node(self, node_id: int) -> dict[str, Any]:
        resp = await self._t.arequest("GET", f"{self.ENDPOINT}/{path_segment(node_id)}")
        return self._get_json(resp)

    async def modify_node(self, node_id: int, data: Mapping[str, Any] | NodeModify) -> dict[str, Any]:
        resp = await self._t.arequest("PUT", f"{self.ENDPOINT}/{path_segment(node_id)}", json=self._parse_modify_data(data))
        return self._get_json(resp)

    async def remove_node(self, node_id: int) -> Any:
        resp = await self._t.arequest("DELETE", f"{self.ENDPOINT}/{path_segment(node_id)}")
        return self._get_json(resp)

    async def get_nodes(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        resp = await self._t.arequest("GET", self.LIST_ENDPOINT, params=params)
        return self._get_json(resp)

    async def reconnect_node(self, node_id: int) -> Any:
        resp = await self._t.arequest("POST", f"{self.ENDPOINT}/{path_segment(node_id)}/reconnect")
        return self._get_json(resp)

    async def get_nodes_usage(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = await self._t.arequest("GET", self.USAGE_ENDPOINT, params=params)
        return self._get_json(resp)
