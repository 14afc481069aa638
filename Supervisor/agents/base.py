"""
base.py

Abstract base class for worker agents and the WorkerResult model.

Every worker in a supervised team implements this interface so the
executor can invoke them uniformly. The supervisor itself only ever reads
``name``.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from langchain_core.messages import BaseMessage
from pydantic import BaseModel, Field


class WorkerResult(BaseModel):
    """Standardised result returned by every worker."""

    response: str = Field(
        description="The main textual output from the worker"
    )
    sources: List[str] = Field(
        default_factory=list,
        description="Citations or references produced by the worker",
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message if the worker failed",
    )


class WorkerAgent(ABC):
    """Uniform interface that every worker agent must implement."""

    name: str

    @abstractmethod
    def invoke(self, instructions: str, messages: Sequence[BaseMessage]) -> WorkerResult:
        """Carry out the sub-task the supervisor assigned.

        Parameters
        ----------
        instructions:
            The supervisor's brief for this step.
        messages:
            The conversation so far, including earlier worker reports.

        Returns
        -------
        WorkerResult
        """
        ...
