from marzban.models.base import Payload, validate_payload
from marzban.models.admin import AdminCreate, AdminModify, AdminPartialModify
from marzban.models.node import NodeCreate, NodeModify
from marzban.models.template import TemplateCreate, TemplateModify
from marzban.models.user import ProxySettings, UserCreate, UserModify

__all__ = [
    "Payload",
    "validate_payload",
    "AdminCreate",
    "AdminModify",
    "AdminPartialModify",
    "NodeCreate",
    "NodeModify",
    "TemplateCreate",
    "TemplateModify",
    "ProxySettings",
    "UserCreate",
    "UserModify",
]
