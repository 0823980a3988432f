from typing import Any, Mapping

from marzban.models import AdminCreate
from marzban.resources.admins.admins_core import _AdminsCore
from marzban.resources.base import BaseAsyncResource, path_segment


class AsyncAdmins(BaseAsyncResource, _AdminsCore):
    async def get_current_admin(self) -> dict[str, Any]:
        """Return the admin the client is authenticated as."""
        resp = await self._t.arequest("GET", self.ENDPOINT)
        return self._get_json(resp)

    async def create_admin(self, data: Mapping[str, Any] | AdminCreate) -> dict[str, Any]:
        """Create an admin."""
        resp = await self._t.arequest("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    async def modify_admin(self, username: str, data: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
        """Modify an admin. ``is_sudo`` is required unless ``partial`` is set."""
        resp = await self._t.arequest(
            "PUT", f"{self.ENDPOINT}/{path_segment(username)}", json=self._parse_modify_data(data, partial)
        )
        return self._get_json(resp)

    async def remove_admin(self, username: str) -> Any:
        resp = await self._t.arequest("DELETE", f"{self.ENDPOINT}/{path_segment(username)}")
        return self._get_json(resp)

    async def get_admins(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        resp = await self._t.arequest("GET", self.LIST_ENDPOINT, params=params)
        return self._get_json(resp)
