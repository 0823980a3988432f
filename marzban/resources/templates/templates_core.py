from typing import Any, Mapping

from marzban.models import TemplateCreate, TemplateModify, validate_payload


class _TemplatesCore:
    ENDPOINT = "/user_template"

    def _parse_create_data(self, data: Mapping[str, Any] | TemplateCreate) -> dict[str, Any]:
        return validate_payload(TemplateCreate, data)

    def _parse_update_data(self, data: Mapping[str, Any] | TemplateModify) -> dict[str, Any]:
        return validate_payload(TemplateModify, data)
