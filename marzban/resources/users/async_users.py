from typing import Any, Mapping

from marzban.models import UserCreate, UserModify
from marzban.resources.base import BaseAsyncResource, path_segment
from marzban.resources.users.users_core import _UsersCore


class AsyncUsers(BaseAsyncResource, _UsersCore):
    """Async users resource."""

    async def add_user(self, data: Mapping[str, Any] | UserCreate) -> dict[str, Any]:
        """Create a user. ``username`` and ``proxies`` are required."""
        resp = await self._t.arequest("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    async def get_user(self, username: str) -> dict[str, Any]:
        resp = await self._t.arequest("GET", f"{self.ENDPOINT}/{path_segment(username)}")
        return self._get_json(resp)

    async def modify_user(self, username: str, data: Mapping[str, Any] | UserModify) -> dict[str, Any]:
        resp = await self._t.arequest("PUT", f"{self.ENDPOINT}/{path_segment(username)}", json=self._parse_modify_data(data))
        return self._get_json(resp)

    async def remove_user(self, username: str) -> Any:
        resp = await self._t.arequest("DELETE", f"{self.ENDPOINT}/{path_segment(username)}")
        return self._get_json(resp)

    async def reset_user_data_usage(self, username: str) -> dict[str, Any]:
        resp = await self._t.arequest("POST", f"{self.ENDPOINT}/{path_segment(username)}/reset")
        return self._get_json(resp)

    async def revoke_user_subscription(self, username: str) -> dict[str, Any]:
        resp = await self._t.arequest("POST", f"{self.ENDPOINT}/{path_segment(username)}/revoke_sub")
        return self._get_json(resp)

    async def get_users(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = await self._t.arequest("GET", self.LIST_ENDPOINT, params=params)
        return self._get_json(resp)

    async def reset_users_data_usage(self) -> Any:
        resp = await self._t.arequest("POST", f"{self.LIST_ENDPOINT}/reset")
        return self._get_json(resp)

    async def get_user_usage(self, username: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = await self._t.arequest("GET", f"{self.ENDPOINT}/{path_segment(username)}/usage", params=params)
        return self._get_json(resp)

    async def get_users_usage(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = await self._t.arequest("GET", f"{self.LIST_ENDPOINT}/usage", params=params)
        return self._get_json(resp)

    async def set_user_owner(self, username: str, admin_username: str) -> dict[str, Any]:
        resp = await self._t.arequest(
            "PUT",
            f"{self.ENDPOINT}/{path_segment(username)}/set-owner",
            params=self._set_owner_params(username, admin_username),
        )
        return self._get_json(resp)

    async def get_expired_users(self, params: Mapping[str, Any] | None = None) -> list[str]:
        resp = await self._t.arequest("GET", self.EXPIRED_ENDPOINT, params=params)
        return self._get_json(resp)

    async def delete_expired_users(self, params: Mapping[str, Any] | None = None) -> list[str]:
        resp = await self._t.arequest("DELETE", self.EXPIRED_ENDPOINT, params=params)
        return self._get_json(resp)

    async def get_user_subscription(self, token: str) -> Any:
        resp = await self._t.arequest("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}", base="sub")
        return self._get_json(resp)

    async def get_user_subscription_info(self, token: str) -> dict[str, Any]:
        resp = await self._t.arequest("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}/info", base="sub")
        return self._get_json(resp)

    async def get_user_subscription_usage(self, token: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = await self._t.arequest(
            "GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}/usage", params=params, base="sub"
        )
        return self._get_json(resp)

    async def get_user_subscription_with_client_type(self, token: str, client_type: str) -> Any:
        resp = await self._t.arequest("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}/{path_segment(client_type)}", base="sub")
        return self._get_json(resp)
