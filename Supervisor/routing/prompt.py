"""
prompt.py

Prompt assembler for the supervisor.

Builds a ``ChatPromptTemplate`` made of three parts:

1. the system directive, with the worker roster substituted for
   ``{team_members}``;
2. the live conversation, injected through ``MessagesPlaceholder("messages")``;
3. a closing steering message listing the legal options.

Assembly is pure. Template problems are reported here as
``SupervisorConfigError`` so they never reach the model call.
"""

from typing import Optional, Sequence

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from Supervisor.errors import SupervisorConfigError
from Supervisor.prompts import (
    DEFAULT_SUPERVISOR_PROMPT,
    STEERING_PROMPT,
    TEAM_MEMBERS_PLACEHOLDER,
)
from Supervisor.routing.schema import build_route_options

MESSAGES_KEY = "messages"
TEAM_MEMBERS_KEY = "team_members"


def assemble_prompt(
    roster: Sequence[str],
    system_prompt: Optional[str] = None,
) -> ChatPromptTemplate:
    """Return the supervisor prompt with roster and options already bound.

    The returned template expects a single input, ``messages``.

    Raises
    ------
    SupervisorConfigError
        If ``system_prompt`` lacks ``{team_members}`` or references any
        other variable that would be left unbound.
    """
    template = system_prompt if system_prompt and system_prompt.strip() else DEFAULT_SUPERVISOR_PROMPT

    try:
        system = ChatPromptTemplate.from_messages([("system", template)])
        prompt = ChatPromptTemplate.from_messages([
            ("system", template),
            MessagesPlaceholder(MESSAGES_KEY),
            ("system", STEERING_PROMPT),
        ])
    except (KeyError, ValueError) as exc:
        raise SupervisorConfigError(f"Invalid supervisor prompt: {exc}") from exc

    # An escaped "{{team_members}}" renders literally and is not a variable.
    if TEAM_MEMBERS_KEY not in system.input_variables:
        raise SupervisorConfigError(
            f"Supervisor prompt must contain {TEAM_MEMBERS_PLACEHOLDER}"
        )

    options = build_route_options(roster)
    prompt = prompt.partial(
        options=", ".join(options),
        team_members=", ".join(roster),
    )

    unbound = sorted(set(prompt.input_variables) - {MESSAGES_KEY})
    if unbound:
        raise SupervisorConfigError(
            f"Supervisor prompt references unknown variables: {', '.join(unbound)}"
        )
    return prompt
