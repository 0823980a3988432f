from marzban.resources.templates.async_templates import AsyncTemplates
from marzban.resources.templates.templates import Templates

__all__ = ["Templates", "AsyncTemplates"]
