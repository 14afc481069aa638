"""
supervisor.py

Assembles the supervisor decision pipeline and packages it, together with
its guardrail metadata, into a ``SupervisorDescriptor`` for the executor.

Pipeline:
    prompt -> model (forced ``route`` call) -> JsonOutputToolsParser -> Decision

The descriptor is immutable. Counting iterations against
``recursion_limit`` and running ``moderations`` are left to the executor.
"""

import logging
import math
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from langchain_core.output_parsers.openai_tools import JsonOutputToolsParser
from langchain_core.runnables import Runnable, RunnableLambda
from pydantic import BaseModel, ConfigDict, Field

from Supervisor.config import DEFAULT_RECURSION_LIMIT, DEFAULT_SUPERVISOR_NAME
from Supervisor.errors import SupervisorConfigError
from Supervisor.moderation.base import SupportsModeration
from Supervisor.routing import (
    assemble_prompt,
    bind_route_tool,
    build_route_options,
    build_route_tool,
    extract_decision,
    worker_names,
)
from Supervisor.state import Decision

logger = logging.getLogger(__name__)


def parse_recursion_limit(value: Union[str, int, float, None]) -> int:
    """Parse a recursion limit from configuration text.

    Returns ``DEFAULT_RECURSION_LIMIT`` for empty, non-numeric, non-finite
    or non-positive input. Fractional values are truncated.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_RECURSION_LIMIT

    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid recursion limit %r, using default %d", value, DEFAULT_RECURSION_LIMIT
        )
        return DEFAULT_RECURSION_LIMIT

    if not math.isfinite(number) or int(number) < 1:
        logger.warning(
            "Recursion limit %r is not a positive number, using default %d",
            value,
            DEFAULT_RECURSION_LIMIT,
        )
        return DEFAULT_RECURSION_LIMIT
    return int(number)


def _as_messages(messages: Union[str, Sequence[Any]]) -> List[Any]:
    # A bare string is one message, not a sequence of characters.
    if isinstance(messages, str):
        return [messages]
    return list(messages)


class SupervisorDescriptor(BaseModel):
    """What the executor receives: the decision pipeline plus guardrails."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(description="Node name of the supervisor in the team graph")
    type: str = Field(default="supervisor")
    node: Runnable = Field(description="Pipeline mapping {'messages': [...]} to a Decision")
    workers: Tuple[str, ...] = Field(description="Worker roster, in routing order")
    options: Tuple[str, ...] = Field(description="Legal values of Decision.next")
    recursion_limit: int = Field(gt=0, description="Max supervisor steps per run")
    llm: Any = Field(description="The model the route tool was bound to")
    moderations: Tuple[SupportsModeration, ...] = Field(
        default=(),
        description="Input moderation gates for the executor to run, in order",
    )

    def decide(self, messages: Union[str, Sequence[Any]]) -> Decision:
        """Choose the next worker (or FINISH) for ``messages``."""
        return self.node.invoke({"messages": _as_messages(messages)})

    async def adecide(self, messages: Union[str, Sequence[Any]]) -> Decision:
        """Async variant of :meth:`decide`."""
        return await self.node.ainvoke({"messages": _as_messages(messages)})


def build_supervisor(
    llm: Any,
    workers: Iterable[Any],
    name: Optional[str] = None,
    system_prompt: Optional[str] = None,
    recursion_limit: Union[str, int, float, None] = None,
    moderations: Optional[Iterable[SupportsModeration]] = None,
) -> SupervisorDescriptor:
    """Build a supervisor for ``workers`` backed by ``llm``.

    Parameters
    ----------
    llm:
        A chat model supporting forced tool calls.
    workers:
        Worker descriptors (objects with ``name``) or plain names.
    name:
        Supervisor node name; defaults to ``"supervisor"``.
    system_prompt:
        Optional override of the default prompt; must contain
        ``{team_members}``.
    recursion_limit:
        Raw configuration value, see :func:`parse_recursion_limit`.
    moderations:
        Input moderation gates, stored for the executor.

    Raises
    ------
    SupervisorConfigError
        On any configuration problem. No model call is made here.
    """
    gates = tuple(moderations or ())
    for gate in gates:
        if not isinstance(gate, SupportsModeration):
            raise SupervisorConfigError(
                f"Moderation gate {gate!r} has no check(text) operation"
            )

    roster = worker_names(workers)
    options = build_route_options(roster)

    prompt = assemble_prompt(roster, system_prompt)
    bound_llm = bind_route_tool(llm, build_route_tool(options))

    def _select(candidates: List[dict]) -> Decision:
        return extract_decision(candidates, options)

    supervisor_name = name if name and name.strip() else DEFAULT_SUPERVISOR_NAME
    node = (
        prompt
        | bound_llm
        | JsonOutputToolsParser()
        | RunnableLambda(_select)
    ).with_config(run_name=supervisor_name)

    descriptor = SupervisorDescriptor(
        name=supervisor_name,
        node=node,
        workers=roster,
        options=tuple(options),
        recursion_limit=parse_recursion_limit(recursion_limit),
        llm=llm,
        moderations=gates,
    )
    logger.info(
        "Supervisor '%s' ready: workers=%s, recursion_limit=%d, moderations=%d",
        descriptor.name,
        list(roster),
        descriptor.recursion_limit,
        len(descriptor.moderations),
    )
    return descriptor
