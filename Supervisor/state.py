"""
state.py

Defines the TeamState TypedDict used by the reference executor graph and
the Pydantic models produced by the supervisor decision pipeline.
"""

from typing import Annotated, List, TypedDict

from langchain_core.messages import BaseMessage
from langgraph.graph.message import add_messages
from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# TeamState -- shared state flowing through the executor graph
# ---------------------------------------------------------------------------

class TeamState(TypedDict):
    """State for one run of a supervisor-led team."""

    messages: Annotated[List[BaseMessage], add_messages]  # Conversation so far
    next: str                                              # Worker name or FINISH
    instructions: str                                      # Brief for the next worker


# ---------------------------------------------------------------------------
# Pydantic schemas for supervisor output
# ---------------------------------------------------------------------------

class Decision(BaseModel):
    """The routing decision produced by one supervisor invocation."""

    model_config = ConfigDict(frozen=True)

    next: str = Field(
        description="Name of the worker to act next, or FINISH"
    )
    instructions: str = Field(
        description="The specific instructions of the sub-task the next role should accomplish"
    )
