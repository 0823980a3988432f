from typing import Any, Mapping

from marzban.models import TemplateCreate, TemplateModify
from marzban.resources.base import BaseResource, path_segment
from marzban.resources.templates.templates_core import _TemplatesCore


class Templates(BaseResource, _TemplatesCore):
    def get_user_templates(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List user templates."""
        resp = self._t.request("GET", self.ENDPOINT, params=params)
        return self._get_json(resp)

    def add_user_template(self, data: Mapping[str, Any] | TemplateCreate) -> dict[str, Any]:
        """Create a user template. ``inbounds`` is required."""
        resp = self._t.request("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    def get_user_template(self, template_id: int) -> dict[str, Any]:
        """Retrieve a user template."""
        resp = self._t.request("GET", f"{self.ENDPOINT}/{path_segment(template_id)}")
        return self._get_json(resp)

    def modify_user_template(self, template_id: int, data: Mapping[str, Any] | TemplateModify) -> dict[str, Any]:
        """Update a user template."""
        resp = self._t.request("PUT", f"{self.ENDPOINT}/{path_segment(template_id)}", json=self._parse_update_data(data))
        return self._get_json(resp)

    def remove_user_template(self, template_id: int) -> Any:
        """Delete a user template."""
        resp = self._t.request("DELETE", f"{self.ENDPOINT}/{path_segment(template_id)}")
        return self._get_json(resp)
