"""
llm.py

Chat model capability contract and the default model factory.
"""

from typing import Any, Protocol, Sequence, runtime_checkable

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable

from Supervisor.config import LLM_MODEL, LLM_TEMPERATURE


@runtime_checkable
class StructuredRoutingModel(Protocol):
    """A chat model that can be forced to call a specific tool.

    Any LangChain chat model whose ``bind_tools`` honours ``tool_choice``
    satisfies this (OpenAI, Anthropic, Mistral, Gemini, ...).
    """

    def bind_tools(self, tools: Sequence[Any], **kwargs: Any) -> Runnable:
        ...


def get_chat_model() -> BaseChatModel:
    """Build the default supervisor model from configuration."""
    from langchain_google_genai import ChatGoogleGenerativeAI

    return ChatGoogleGenerativeAI(model=LLM_MODEL, temperature=LLM_TEMPERATURE)
