"""
config.py

Central configuration for the Supervisor decision engine.

All tuneable parameters live here so that nothing is hardcoded in the
routing or executor modules.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# LLM configuration
# ---------------------------------------------------------------------------
LLM_MODEL: str = os.getenv("SUPERVISOR_LLM_MODEL", "gemini-1.5-flash")
LLM_TEMPERATURE: float = float(os.getenv("SUPERVISOR_LLM_TEMPERATURE", "0"))

# ---------------------------------------------------------------------------
# Supervisor identity
# ---------------------------------------------------------------------------
DEFAULT_SUPERVISOR_NAME = "supervisor"
SUPERVISOR_NAME: str = os.getenv("SUPERVISOR_NAME", DEFAULT_SUPERVISOR_NAME)

# ---------------------------------------------------------------------------
# Loop guardrails -- the raw text is parsed by parse_recursion_limit()
# ---------------------------------------------------------------------------
DEFAULT_RECURSION_LIMIT = 100
RECURSION_LIMIT_TEXT: str = os.getenv("SUPERVISOR_RECURSION_LIMIT", "")

# ---------------------------------------------------------------------------
# Routing vocabulary
# ---------------------------------------------------------------------------
FINISH = "FINISH"
ROUTE_TOOL_NAME = "route"
