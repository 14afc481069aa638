"""
errors.py

Exception types raised by the Supervisor package.
"""


class SupervisorError(Exception):
    """Base class for all supervisor failures."""

    pass


class SupervisorConfigError(SupervisorError):
    """Raised when the supervisor is configured in a way that can never work.

    Examples: a custom prompt without the ``{team_members}`` placeholder, a
    chat model that cannot be forced to call the route tool, or duplicate
    worker names. These are not retryable.
    """

    pass


class DecisionExtractionError(SupervisorError):
    """Raised when a model response does not yield exactly one legal decision."""

    pass


class ModerationRejectedError(SupervisorError):
    """Raised by the executor when an input moderation gate rejects content."""

    def __init__(self, gate_name: str, message: str):
        super().__init__(message)
        self.gate_name = gate_name
