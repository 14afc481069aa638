"""
requester.py

Decision requester for the supervisor.

Binds the ``route`` tool to the chat model with a forced ``tool_choice``
so the model cannot answer in free text.
"""

import logging
from typing import Any, Dict

from langchain_core.runnables import Runnable

from Supervisor.config import ROUTE_TOOL_NAME
from Supervisor.errors import SupervisorConfigError
from Supervisor.llm import StructuredRoutingModel

logger = logging.getLogger(__name__)


def bind_route_tool(llm: Any, tool: Dict[str, Any]) -> Runnable:
    """Return ``llm`` bound to ``tool`` with the tool call forced.

    Raises
    ------
    SupervisorConfigError
        If the model does not support forced tool calling.
    """
    if llm is None:
        raise SupervisorConfigError("A chat model is required for the supervisor")
    if not isinstance(llm, StructuredRoutingModel):
        raise SupervisorConfigError(
            f"{type(llm).__name__} does not support tool calling; use a model "
            "capable of function calling (OpenAI, Mistral, Anthropic, Gemini, ...)"
        )

    try:
        bound = llm.bind_tools([tool], tool_choice=ROUTE_TOOL_NAME)
    except (NotImplementedError, TypeError) as exc:
        raise SupervisorConfigError(
            f"{type(llm).__name__} cannot be forced to call '{ROUTE_TOOL_NAME}': {exc}"
        ) from exc

    logger.debug("Bound '%s' tool to %s", ROUTE_TOOL_NAME, type(llm).__name__)
    return bound
