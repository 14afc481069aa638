"""Building blocks of the supervisor decision pipeline."""

from Supervisor.routing.extractor import extract_decision
from Supervisor.routing.prompt import assemble_prompt
from Supervisor.routing.requester import bind_route_tool
from Supervisor.routing.schema import build_route_options, build_route_tool, worker_names

__all__ = [
    "assemble_prompt",
    "bind_route_tool",
    "build_route_options",
    "build_route_tool",
    "extract_decision",
    "worker_names",
]
