from typing import Any, Mapping

from marzban.resources.base import BaseResource
from marzban.resources.core.core_core import _CoreCore


class Core(BaseResource, _CoreCore):
    """Xray core managed by the panel."""

    def get_core_stats(self) -> dict[str, Any]:
        resp = self._t.request("GET", self.ENDPOINT)
        return self._get_json(resp)

    def restart_core(self) -> Any:
        resp = self._t.request("POST", self.RESTART_ENDPOINT)
        return self._get_json(resp)

    def get_core_config(self) -> dict[str, Any]:
        resp = self._t.request("GET", self.CONFIG_ENDPOINT)
        return self._get_json(resp)

    def modify_core_config(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """Replace the core config. The document is sent as given."""
        resp = self._t.request("PUT", self.CONFIG_ENDPOINT, json=dict(config))
        return self._get_json(resp)
