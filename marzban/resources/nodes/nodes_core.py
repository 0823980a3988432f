from typing import Any, Mapping

from marzban.models import NodeCreate, NodeModify, validate_payload


class _NodesCore:
    ENDPOINT = "/node"
    LIST_ENDPOINT = "/nodes"
    SETTINGS_ENDPOINT = "/node/settings"
    USAGE_ENDPOINT = "/nodes/usage"

    def _parse_create_data(self, data: Mapping[str, Any] | NodeCreate) -> dict[str, Any]:
        # fills port, api_port, usage_coefficient and add_as_new_host defaults
        return validate_payload(NodeCreate, data)

    def _parse_modify_data(self, data: Mapping[str, Any] | NodeModify) -> dict[str, Any]:
        return validate_payload(NodeModify, data)
