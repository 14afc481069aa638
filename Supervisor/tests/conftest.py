"""
Shared fixtures for the Supervisor tests.

``FakeRoutingModel`` is a LangChain chat model that records what it was
bound to and asked, and answers with scripted ``route`` tool calls.
"""

from typing import Any, Dict, List, Optional

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field


class FakeRoutingModel(BaseChatModel):
    """Chat model returning one scripted list of route calls per request.

    Once the script is exhausted the last entry is repeated.
    """

    script: List[List[Dict[str, Any]]] = Field(default_factory=list)
    bound: List[Dict[str, Any]] = Field(default_factory=list)
    requests: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "fake-routing"

    def bind_tools(self, tools, *, tool_choice=None, **kwargs):
        self.bound.append({"tools": list(tools), "tool_choice": tool_choice})
        return self.bind(tools=list(tools), tool_choice=tool_choice, **kwargs)

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager=None,
        **kwargs: Any,
    ) -> ChatResult:
        index = len(self.requests)
        self.requests.append({"messages": list(messages), **kwargs})
        calls = self.script[min(index, len(self.script) - 1)] if self.script else []
        message = AIMessage(
            content="",
            tool_calls=[
                {"name": "route", "args": args, "id": f"call_{index}_{i}", "type": "tool_call"}
                for i, args in enumerate(calls)
            ],
        )
        return ChatResult(generations=[ChatGeneration(message=message)])


def route(next_: str, instructions: str = "", reasoning: str = "because") -> Dict[str, Any]:
    """Arguments of one ``route`` tool call."""
    return {"reasoning": reasoning, "next": next_, "instructions": instructions}


@pytest.fixture
def make_llm():
    """Factory: ``make_llm([route(...)], [route(...)], ...)``, one list per request."""

    def _make(*script: List[Dict[str, Any]]) -> FakeRoutingModel:
        return FakeRoutingModel(script=[list(calls) for calls in script])

    return _make


@pytest.fixture
def route_args():
    return route
