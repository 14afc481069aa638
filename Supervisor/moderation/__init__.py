"""Input moderation gates carried by the supervisor for its executor."""

from Supervisor.moderation.base import ModerationGate, SupportsModeration, run_input_moderation
from Supervisor.moderation.deny_list import DenyListModeration

__all__ = [
    "DenyListModeration",
    "ModerationGate",
    "SupportsModeration",
    "run_input_moderation",
]
