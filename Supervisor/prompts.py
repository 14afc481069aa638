"""
prompts.py

Prompt text used by the supervisor decision pipeline.

The system prompt must contain the ``{team_members}`` placeholder; the
steering prompt is appended after the conversation and restates the legal
options via ``{options}``.
"""

TEAM_MEMBERS_PLACEHOLDER = "{team_members}"

DEFAULT_SUPERVISOR_PROMPT = (
    "You are a supervisor tasked with managing a conversation between the "
    "following workers: {team_members}.\n"
    "Given the following user request, respond with the worker to act next.\n"
    "Each worker will perform a task and respond with their results and status.\n"
    "When finished, respond with FINISH.\n\n"
    "Select strategically to minimize the number of steps taken."
)

STEERING_PROMPT = (
    "Given the conversation above, who should act next? "
    "Or should we FINISH? Select one of: {options}"
)
