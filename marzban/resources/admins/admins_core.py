from typing import Any, Mapping

from marzban.models import AdminCreate, AdminModify, AdminPartialModify, validate_payload


class _AdminsCore:
    ENDPOINT = "/admin"
    LIST_ENDPOINT = "/admins"

    def _parse_create_data(self, data: Mapping[str, Any] | AdminCreate) -> dict[str, Any]:
        return validate_payload(AdminCreate, data)

    def _parse_modify_data(self, data: Mapping[str, Any], partial: bool) -> dict[str, Any]:
        return validate_payload(AdminPartialModify if partial else AdminModify, data)
