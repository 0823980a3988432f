"""/user and /users endpoints, plus the public subscription links."""
from __future__ import annotations

from typing import Any, Mapping

from marzban.models import UserCreate, UserModify
from marzban.resources.base import BaseResource, path_segment
from marzban.resources.users.users_core import _UsersCore


class Users(BaseResource, _UsersCore):
    """
    Resources to manage proxy users.

    Example usage::

        with marzban.Client(domain="panel.example.com", port=8000, username="admin", password="...") as client:
            client.users.add_user({"username": "alice", "proxies": {"vless": {}}})
    """

    def add_user(self, data: Mapping[str, Any] | UserCreate) -> dict[str, Any]:
        """
        Create a user.

        :param data: ``username`` and ``proxies`` are required. ``status``
            defaults to ``active``.
        :type data: dict or UserCreate
        :return: The created user.
        :rtype: dict
        :raises ValidationError: if ``data`` is invalid, nothing is sent.
        """
        resp = self._t.request("POST", self.ENDPOINT, json=self._parse_create_data(data))
        return self._get_json(resp)

    def get_user(self, username: str) -> dict[str, Any]:
        resp = self._t.request("GET", f"{self.ENDPOINT}/{path_segment(username)}")
        return self._get_json(resp)

    def modify_user(self, username: str, data: Mapping[str, Any] | UserModify) -> dict[str, Any]:
        """
        Modify a user. Only the fields present in ``data`` are changed.

        :param username: The user to modify.
        :type username: str
        :param data: Fields to change.
        :type data: dict or UserModify
        :return: The updated user.
        :rtype: dict
        """
        resp = self._t.request("PUT", f"{self.ENDPOINT}/{path_segment(username)}", json=self._parse_modify_data(data))
        return self._get_json(resp)

    def remove_user(self, username: str) -> Any:
        resp = self._t.request("DELETE", f"{self.ENDPOINT}/{path_segment(username)}")
        return self._get_json(resp)

    def reset_user_data_usage(self, username: str) -> dict[str, Any]:
        resp = self._t.request("POST", f"{self.ENDPOINT}/{path_segment(username)}/reset")
        return self._get_json(resp)

    def revoke_user_subscription(self, username: str) -> dict[str, Any]:
        """Revoke the subscription link, the user gets a new one."""
        resp = self._t.request("POST", f"{self.ENDPOINT}/{path_segment(username)}/revoke_sub")
        return self._get_json(resp)

    def get_users(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        List users.

        :param params: Query forwarded as is (offset, limit, username, search,
            admin, status, sort).
        :type params: dict or None
        :return: ``{"users": [...], "total": n}``
        :rtype: dict
        """
        resp = self._t.request("GET", self.LIST_ENDPOINT, params=params)
        return self._get_json(resp)

    def reset_users_data_usage(self) -> Any:
        resp = self._t.request("POST", f"{self.LIST_ENDPOINT}/reset")
        return self._get_json(resp)

    def get_user_usage(self, username: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = self._t.request("GET", f"{self.ENDPOINT}/{path_segment(username)}/usage", params=params)
        return self._get_json(resp)

    def get_users_usage(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = self._t.request("GET", f"{self.LIST_ENDPOINT}/usage", params=params)
        return self._get_json(resp)

    def set_user_owner(self, username: str, admin_username: str) -> dict[str, Any]:
        """Move ``username`` under ``admin_username``."""
        resp = self._t.request(
            "PUT",
            f"{self.ENDPOINT}/{path_segment(username)}/set-owner",
            params=self._set_owner_params(username, admin_username),
        )
        return self._get_json(resp)

    def get_expired_users(self, params: Mapping[str, Any] | None = None) -> list[str]:
        """Usernames expired in the ``expired_after``/``expired_before`` window."""
        resp = self._t.request("GET", self.EXPIRED_ENDPOINT, params=params)
        return self._get_json(resp)

    def delete_expired_users(self, params: Mapping[str, Any] | None = None) -> list[str]:
        resp = self._t.request("DELETE", self.EXPIRED_ENDPOINT, params=params)
        return self._get_json(resp)

    # -------------- subscription -------------- #
    def get_user_subscription(self, token: str) -> Any:
        """Subscription content; text (links or client config) or JSON."""
        resp = self._t.request("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}", base="sub")
        return self._get_json(resp)

    def get_user_subscription_info(self, token: str) -> dict[str, Any]:
        resp = self._t.request("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}/info", base="sub")
        return self._get_json(resp)

    def get_user_subscription_usage(self, token: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        resp = self._t.request("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}/usage", params=params, base="sub")
        return self._get_json(resp)

    def get_user_subscription_with_client_type(self, token: str, client_type: str) -> Any:
        """Subscription rendered for ``client_type`` (sing-box, clash-meta, v2ray...)."""
        resp = self._t.request("GET", f"{self.SUBSCRIPTION_ENDPOINT}/{path_segment(token)}/{path_segment(client_type)}", base="sub")
        return self._get_json(resp)
