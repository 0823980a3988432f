from marzban.resources.admins.admins import Admins
from marzban.resources.admins.async_admins import AsyncAdmins

__all__ = ["Admins", "AsyncAdmins"]
