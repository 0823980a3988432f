from typing import Any, Mapping

from marzban.models import TemplateCreate, TemplateModify
from marzban.resources.base import BaseAsyncResource, path_segment
from marzban.resources.templates.templates_core import _TemplatesCore


class AsyncTemplates(BaseAsyncResource, _TemplatesCore):
    async def get_user_templates(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List user templates."""
        resp = await self._t.arequest("GET", self.ENDPOINT, params=params)
        return self._get_json(resp)

    async def add_user_template(self, data: Mapping[str, Any] | TemplateCreate) -> dict[str, Any]:
        """Create a user template."""
        resp = await self._t.arequest("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    async def get_user_template(self, template_id: int) -> dict[str, Any]:
        """Retrieve a user template."""
        resp = await self._t.arequest("GET", f"{self.ENDPOINT}/{path_segment(template_id)}")
        return self._get_json(resp)

    async def modify_user_template(self, template_id: int, data: Mapping[str, Any] | TemplateModify) -> dict[str, Any]:
        """Update a user template."""
        resp = await self._t.arequest("PUT", f"{self.ENDPOINT}/{path_segment(template_id)}", json=self._parse_update_data(data))
        return self._get_json(resp)

    async def remove_user_template(self, template_id: int) -> Any:
        """Delete a user template."""
        resp = await self._t.arequest("DELETE", f"{self.ENDPOINT}/{path_segment(template_id)}")
        return self._get_json(resp)
