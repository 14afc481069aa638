"""
schema.py

Decision schema builder for the supervisor.

Produces the closed vocabulary of legal routing targets (``FINISH`` first,
then the worker roster in order) and the ``route`` tool definition the
model is forced to call.
"""

import logging
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from Supervisor.config import FINISH, ROUTE_TOOL_NAME
from Supervisor.errors import SupervisorConfigError

logger = logging.getLogger(__name__)


def _iter_workers(workers: Iterable[Any]) -> Iterable[Any]:
    for worker in workers:
        if isinstance(worker, (list, tuple)):
            yield from _iter_workers(worker)
        else:
            yield worker


def worker_names(workers: Iterable[Any]) -> Tuple[str, ...]:
    """Flatten worker descriptors into an ordered tuple of unique names.

    Accepts plain strings or any object exposing a ``name`` attribute.
    Nested lists are flattened in order.

    Raises
    ------
    SupervisorConfigError
        If a worker has no usable name or two workers share a name.
    """
    names: List[str] = []
    for worker in _iter_workers(workers or []):
        name = worker if isinstance(worker, str) else getattr(worker, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise SupervisorConfigError(f"Worker has no usable name: {worker!r}")
        if name == FINISH:
            raise SupervisorConfigError(
                f"Worker name '{FINISH}' is reserved for the terminal decision"
            )
        if name in names:
            raise SupervisorConfigError(f"Duplicate worker name: {name}")
        names.append(name)
    return tuple(names)


def build_route_options(roster: Sequence[str]) -> List[str]:
    """Return the legal ``next`` values: ``FINISH`` followed by the roster."""
    if not roster:
        logger.info("Supervisor has no workers; %s is the only option", FINISH)
    return [FINISH, *roster]


def build_route_tool(options: Sequence[str]) -> Dict[str, Any]:
    """Build the OpenAI-style function tool the model must call."""
    return {
        "type": "function",
        "function": {
            "name": ROUTE_TOOL_NAME,
            "description": "Select the next role.",
            "parameters": {
                "title": "routeSchema",
                "type": "object",
                "properties": {
                    "reasoning": {
                        "title": "Reasoning",
                        "type": "string",
                    },
                    "next": {
                        "title": "Next",
                        "anyOf": [{"enum": list(options)}],
                    },
                    "instructions": {
                        "title": "Instructions",
                        "type": "string",
                        "description": (
                            "The specific instructions of the sub-task "
                            "the next role should accomplish."
                        ),
                    },
                },
                "required": ["reasoning", "next", "instructions"],
            },
        },
    }
