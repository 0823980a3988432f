from typing import Any, Mapping

from marzban.resources.base import BaseResource
from marzban.resources.system.system_core import _SystemCore


class System(BaseResource, _SystemCore):
    def get_system_stats(self) -> dict[str, Any]:
        """Memory, CPU, user counts and bandwidth of the panel host."""
        resp = self._t.request("GET", self.ENDPOINT)
        return self._get_json(resp)

    def get_inbounds(self) -> dict[str, list[dict[str, Any]]]:
        """Configured inbounds grouped by protocol."""
        resp = self._t.request("GET", self.INBOUNDS_ENDPOINT)
        return self._get_json(resp)

    def get_hosts(self) -> dict[str, list[dict[str, Any]]]:
        resp = self._t.request("GET", self.HOSTS_ENDPOINT)
        return self._get_json(resp)

    def modify_hosts(self, hosts: Mapping[str, Any]) -> dict[str, list[dict[str, Any]]]:
        """Replace the hosts of every inbound tag in ``hosts``."""
        resp = self._t.request("PUT", self.HOSTS_ENDPOINT, json=dict(hosts))
        return self._get_json(resp)
