from marzban.resources.users.async_users import AsyncUsers
from marzban.resources.users.users import Users

__all__ = ["Users", "AsyncUsers"]
