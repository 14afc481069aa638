"""
Tests for input moderation gates.
"""

from unittest.mock import MagicMock

import pytest

from Supervisor.errors import ModerationRejectedError
from Supervisor.moderation import DenyListModeration, ModerationGate, run_input_moderation


class TestDenyListModeration:
    def test_passes_clean_text(self):
        assert DenyListModeration(["drop table"]).check("Write a fib function") is True

    def test_rejects_case_insensitive(self):
        assert DenyListModeration(["drop table"]).check("please DROP TABLE users") is False

    def test_ignores_blank_phrases(self):
        gate = DenyListModeration(["", "  "])
        assert gate.deny_list == []
        assert gate.check("anything") is True

    def test_custom_error_message(self):
        gate = DenyListModeration(["x"], error_message="Not allowed")
        assert gate.error_message == "Not allowed"


class TestRunInputModeration:
    def test_all_pass(self):
        run_input_moderation([DenyListModeration(["a1"]), DenyListModeration(["b2"])], "hello")

    def test_no_gates(self):
        run_input_moderation([], "anything")

    def test_first_reject_raises_and_stops(self):
        later = MagicMock(spec=ModerationGate)
        gate = DenyListModeration(["secret"], error_message="Blocked")

        with pytest.raises(ModerationRejectedError, match="Blocked") as info:
            run_input_moderation([gate, later], "the secret plan")

        assert info.value.gate_name == "deny_list"
        later.check.assert_not_called()

    def test_duck_typed_gate_rejects_with_defaults(self):
        class Refuser:
            def check(self, text):
                return False

        with pytest.raises(ModerationRejectedError, match="rejected by moderation") as info:
            run_input_moderation([Refuser()], "text")
        assert info.value.gate_name == "Refuser"

    def test_gates_run_in_order(self):
        calls = []

        class Recording(ModerationGate):
            def __init__(self, label):
                self.name = label

            def check(self, text):
                calls.append(self.name)
                return True

        run_input_moderation([Recording("one"), Recording("two")], "text")
        assert calls == ["one", "two"]
