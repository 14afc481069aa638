"""Node factories for the supervised team graph."""

from Supervisor.nodes.run_worker import make_worker_node
from Supervisor.nodes.supervise import make_supervisor_node

__all__ = [
    "make_supervisor_node",
    "make_worker_node",
]
