"""Worker agent interface used by the supervised team executor."""

from Supervisor.agents.base import WorkerAgent, WorkerResult

__all__ = [
    "WorkerAgent",
    "WorkerResult",
]
