"""
run_worker.py

Worker node for the team graph.

Invokes one worker with the supervisor's instructions and appends its
report to the conversation, named after the worker, so the supervisor sees
it on the next step. Worker failures are reported in the conversation
rather than aborting the run.
"""

import logging
from typing import Any, Callable, Dict

from langchain_core.messages import HumanMessage

from Supervisor.agents.base import WorkerAgent, WorkerResult
from Supervisor.state import TeamState

logger = logging.getLogger(__name__)


def make_worker_node(worker: WorkerAgent) -> Callable[[TeamState], Dict[str, Any]]:
    """Wrap ``worker`` as a LangGraph node.

    Updates state keys: ``messages``.
    """

    def worker_node(state: TeamState) -> Dict[str, Any]:
        instructions = state.get("instructions", "")
        logger.info("Dispatching to worker: %s", worker.name)
        try:
            result: WorkerResult = worker.invoke(instructions, state.get("messages", []))
        except Exception as exc:
            logger.exception("Worker %s raised exception", worker.name)
            result = WorkerResult(response="", error=f"Worker {worker.name} raised exception: {exc}")

        if result.error:
            logger.warning("Worker %s returned error: %s", worker.name, result.error)
            content = f"Error: {result.error}"
        else:
            content = result.response
            if result.sources:
                content += f"\n\nSources: {', '.join(result.sources)}"
            logger.info("Worker %s completed successfully", worker.name)

        return {"messages": [HumanMessage(content=content, name=worker.name)]}

    return worker_node
