"""
supervise.py

Supervisor node for the team graph.

Asks the supervisor descriptor for the next decision and writes it into
state. Extraction and model errors propagate and abort the run.
"""

import logging
from typing import Any, Callable, Dict

from Supervisor.state import TeamState
from Supervisor.supervisor import SupervisorDescriptor

logger = logging.getLogger(__name__)


def make_supervisor_node(
    supervisor: SupervisorDescriptor,
) -> Callable[[TeamState], Dict[str, Any]]:
    """Wrap ``supervisor`` as a LangGraph node.

    Updates state keys: ``next``, ``instructions``.
    """

    def supervisor_node(state: TeamState) -> Dict[str, Any]:
        decision = supervisor.decide(state.get("messages", []))
        logger.info("[%s] routing to %s", supervisor.name, decision.next)
        return {
            "next": decision.next,
            "instructions": decision.instructions,
        }

    return supervisor_node
