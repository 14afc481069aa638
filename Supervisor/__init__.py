"""
Supervisor - LLM routing brain for LangGraph multi-agent teams.

Given the conversation so far and a roster of worker agents, decides which
worker acts next or whether the task is FINISHed, by forcing the chat model
to call a ``route`` tool whose ``next`` field is restricted to the roster.
"""
