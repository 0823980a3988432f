from typing import Any, Mapping

from marzban.models import UserCreate, UserModify, validate_payload


class _UsersCore:
    ENDPOINT = "/user"
    LIST_ENDPOINT = "/users"
    EXPIRED_ENDPOINT = "/users/expired"
    # served outside /api, see Transport base="sub"
    SUBSCRIPTION_ENDPOINT = "/sub"

    def _parse_create_data(self, data: Mapping[str, Any] | UserCreate) -> dict[str, Any]:
        return validate_payload(UserCreate, data)

    def _parse_modify_data(self, data: Mapping[str, Any] | UserModify) -> dict[str, Any]:
        return validate_payload(UserModify, data)

    def _set_owner_params(self, username: str, admin_username: str) -> dict[str, Any]:
        return {"username": username, "admin_username": admin_username}
