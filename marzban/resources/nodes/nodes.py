from typing import Any, Mapping

from marzban.models import NodeCreate, NodeModify
from marzban.resources.base import BaseResource, path_segment
from marzban.resources.nodes.nodes_core import _NodesCore


class Nodes(BaseResource, _NodesCore):
    """
    Resources to manage nodes.

    Example usage::

        with marzban.Client(domain="panel.example.com", port=8000, username="admin", password="...") as client:
            client.nodes.add_node({"name": "de-1", "address": "203.0.113.7"})
    """

    def get_node_settings(self) -> dict[str, Any]:
        """
        Settings a new node needs, including the panel's client certificate.

        :return: Node settings.
        :rtype: dict
        """
        resp = self._t.request("GET", self.SETTINGS_ENDPOINT)
        return self._get_json(resp)

    def add_node(self, data: Mapping[str, Any] | NodeCreate) -> dict[str, Any]:
        """
        Register a node.

        :param data: ``name`` and ``address`` (an IP) are required; ``port``,
            ``api_port``, ``usage_coefficient`` and ``add_as_new_host`` get defaults.
        :type data: dict or NodeCreate
        :return: The created node.
        :rtype: dict
        """
        resp = self._t.request("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    def get_node(self, node_id: int) -> dict[str, Any]:
        resp = self._t.request("GET", f"{self.ENDPOINT}/{path_segment(node_id)}")
        return self._get_json(resp)

    def modify_node(self, node_id: int, data: Mapping[str, Any] | NodeModify) -> dict[str, Any]:
        """
        Modify a node. Every field is optional.

        :param node_id: The id of the node.
        :type node_id: int
        :param data: Fields to change.
        :type data: dict or NodeModify
        :return: The updated node.
        :rtype: dict
        """
        resp = self._t.request("PUT", f"{self.ENDPOINT}/{path_segment(node_id)}", json=self._parse_modify_data(data))
        return self._get_json(resp)

    def remove_node(self, node_id: int) -> Any:
        resp = self._t.request("DELETE", f"{self.ENDPOINT}/{path_segment(node_id)}")
        return self._get_json(resp)

    def get_nodes(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        resp = self._t.request("GET", self.LIST_ENDPOINT, params=params)
        return self._get_json(resp)

    def reconnect_node(self, node_id: int) -> Any:
        resp = self._t.request("POST", f"{self.ENDPOINT}/{path_segment(node_id)}/reconnect")
        return self._get_json(resp)

    def get_nodes_usage(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Traffic per node.

        :param params: Optional ``start`` and ``end`` of the period.
        :type params: dict or None
        :return: Usage records under ``usages``.
        :rtype: dict
        """
        resp = self._t.request("GET", self.USAGE_ENDPOINT, params=params)
        return self._get_json(resp)
