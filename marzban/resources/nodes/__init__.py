from marzban.resources.nodes.async_nodes import AsyncNodes
from marzban.resources.nodes.nodes import Nodes

__all__ = ["Nodes", "AsyncNodes"]
