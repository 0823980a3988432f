from typing import Any, Mapping

from marzban.models import AdminCreate
from marzban.resources.admins.admins_core import _AdminsCore
from marzban.resources.base import BaseResource, path_segment


class Admins(BaseResource, _AdminsCore):
    def get_current_admin(self) -> dict[str, Any]:
        """Return the admin the client is authenticated as."""
        resp = self._t.request("GET", self.ENDPOINT)
        return self._get_json(resp)

    def create_admin(self, data: Mapping[str, Any] | AdminCreate) -> dict[str, Any]:
        """Create an admin.

        :param data: ``username``, ``password`` (8+ chars) and ``is_sudo`` are required.
        :raises ValidationError: before anything is sent if ``data`` is invalid.
        """
        resp = self._t.request("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    def modify_admin(self, username: str, data: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
        """Modify an admin. ``is_sudo`` is required unless ``partial`` is set."""
        resp = self._t.request(
            "PUT", f"{self.ENDPOINT}/{path_segment(username)}", json=self._parse_modify_data(data, partial)
        )
        return self._get_json(resp)

    def remove_admin(self, username: str) -> Any:
        resp = self._t.request("DELETE", f"{self.ENDPOINT}/{path_segment(username)}")
        return self._get_json(resp)

    def get_admins(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List admins. ``params`` (offset, limit, username) are forwarded as the query."""
        resp = self._t.request("GET", self.LIST_ENDPOINT, params=params)
        return self._get_json(resp)
