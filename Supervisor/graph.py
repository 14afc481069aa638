"""
graph.py

Reference executor for a supervised team.

The supervisor node picks the next worker; each worker reports back to the
supervisor; ``FINISH`` ends the run. Input moderation and the recursion
limit are enforced here, by the executor, using the guardrails carried on
the supervisor descriptor.
"""

import logging
from typing import Any, Dict, Sequence

from langchain_core.messages import HumanMessage
from langgraph.graph import END, START, StateGraph

from Supervisor.agents.base import WorkerAgent
from Supervisor.config import FINISH
from Supervisor.errors import SupervisorConfigError
from Supervisor.moderation.base import run_input_moderation
from Supervisor.nodes.run_worker import make_worker_node
from Supervisor.nodes.supervise import make_supervisor_node
from Supervisor.state import TeamState
from Supervisor.supervisor import SupervisorDescriptor

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Router function (used by conditional edges)
# ---------------------------------------------------------------------------

def next_router(state: TeamState) -> str:
    """Route after the supervisor: the chosen worker, or ``FINISH``."""
    return state.get("next", FINISH)


# ---------------------------------------------------------------------------
# Graph construction
# ---------------------------------------------------------------------------

def build_team_graph(supervisor: SupervisorDescriptor, workers: Sequence[WorkerAgent]):
    """Construct and compile the team graph.

    ``workers`` must match the supervisor's roster exactly.

    Flow:
        START -> supervisor -> (worker | FINISH -> END)
        worker -> supervisor
    """
    by_name: Dict[str, WorkerAgent] = {worker.name: worker for worker in workers}
    if tuple(by_name) != supervisor.workers:
        raise SupervisorConfigError(
            f"Workers {list(by_name)} do not match supervisor roster {list(supervisor.workers)}"
        )
    if supervisor.name in by_name:
        raise SupervisorConfigError(
            f"Supervisor name '{supervisor.name}' clashes with a worker name"
        )

    workflow = StateGraph(TeamState)

    # -- Nodes --
    workflow.add_node(supervisor.name, make_supervisor_node(supervisor))
    for name, worker in by_name.items():
        workflow.add_node(name, make_worker_node(worker))

    # -- Edges --
    workflow.add_edge(START, supervisor.name)
    for name in by_name:
        workflow.add_edge(name, supervisor.name)

    routes = {name: name for name in by_name}
    routes[FINISH] = END
    workflow.add_conditional_edges(supervisor.name, next_router, routes)

    return workflow.compile()


def run_team(
    supervisor: SupervisorDescriptor,
    workers: Sequence[WorkerAgent],
    user_input: str,
) -> Dict[str, Any]:
    """Moderate ``user_input`` and run the team until the supervisor finishes.

    Raises
    ------
    ModerationRejectedError
        If a moderation gate rejects the input; no model is called.
    langgraph.errors.GraphRecursionError
        If the run exceeds ``supervisor.recursion_limit`` steps.
    """
    run_input_moderation(supervisor.moderations, user_input)

    app = build_team_graph(supervisor, workers)
    logger.info(
        "Running team '%s' with recursion_limit=%d",
        supervisor.name,
        supervisor.recursion_limit,
    )
    return app.invoke(
        {"messages": [HumanMessage(content=user_input)], "next": "", "instructions": ""},
        config={"recursion_limit": supervisor.recursion_limit},
    )
