"""
base.py

Moderation gate contract, an abstract base class for gates, and the
executor-side runner that applies them.

The supervisor only stores its gates; it is the executor that calls
``run_input_moderation`` before handing user input to the team.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Protocol, runtime_checkable

from Supervisor.errors import ModerationRejectedError

logger = logging.getLogger(__name__)

DEFAULT_REJECTION_MESSAGE = "Input rejected by moderation."


@runtime_checkable
class SupportsModeration(Protocol):
    """Anything exposing a pass/reject ``check`` over input text."""

    def check(self, text: str) -> bool:
        ...


class ModerationGate(ABC):
    """Uniform pass/reject interface for content-safety checks."""

    name: str = "moderation"
    error_message: str = DEFAULT_REJECTION_MESSAGE

    @abstractmethod
    def check(self, text: str) -> bool:
        """Return ``True`` if ``text`` may be sent on, ``False`` to reject it."""
        ...


def run_input_moderation(gates: Iterable[SupportsModeration], text: str) -> None:
    """Run ``gates`` in order against ``text``.

    Raises
    ------
    ModerationRejectedError
        For the first gate that rejects the input.
    """
    for gate in gates:
        if not gate.check(text):
            gate_name = getattr(gate, "name", type(gate).__name__)
            logger.warning("Input rejected by moderation gate '%s'", gate_name)
            raise ModerationRejectedError(
                gate_name, getattr(gate, "error_message", DEFAULT_REJECTION_MESSAGE)
            )
