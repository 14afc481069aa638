"""
deny_list.py

Simple deny-list moderation gate.

Rejects input that contains any configured phrase (case-insensitive).
"""

from typing import Iterable, Optional

from Supervisor.moderation.base import ModerationGate


class DenyListModeration(ModerationGate):
    """Reject text containing any phrase from ``deny_list``."""

    name = "deny_list"

    def __init__(self, deny_list: Iterable[str], error_message: Optional[str] = None):
        self.deny_list = [
            phrase.strip().lower() for phrase in deny_list if phrase and phrase.strip()
        ]
        if error_message:
            self.error_message = error_message

    def check(self, text: str) -> bool:
        lowered = (text or "").lower()
        return not any(phrase in lowered for phrase in self.deny_list)
