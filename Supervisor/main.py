"""
main.py

Entry point and CLI for the Supervisor decision engine.

Asks the supervisor for one routing decision over a single user message.

Usage:
    python -m Supervisor.main --query "Write a fib function" --workers Researcher Coder
    python -m Supervisor.main -q "..." -w Researcher Coder --deny "password"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

from Supervisor.config import RECURSION_LIMIT_TEXT, SUPERVISOR_NAME
from Supervisor.errors import SupervisorError
from Supervisor.llm import get_chat_model
from Supervisor.moderation import DenyListModeration, run_input_moderation
from Supervisor.state import Decision
from Supervisor.supervisor import build_supervisor


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def run_single_decision(
    query: str,
    workers: List[str],
    system_prompt: Optional[str] = None,
    deny_list: Optional[List[str]] = None,
    llm=None,
) -> Decision:
    """Moderate ``query`` and return the supervisor's decision for it."""
    moderations = [DenyListModeration(deny_list)] if deny_list else []
    supervisor = build_supervisor(
        llm=llm if llm is not None else get_chat_model(),
        workers=workers,
        name=SUPERVISOR_NAME,
        system_prompt=system_prompt,
        recursion_limit=RECURSION_LIMIT_TEXT,
        moderations=moderations,
    )
    run_input_moderation(supervisor.moderations, query)
    return supervisor.decide([query])


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Supervisor decision CLI")
    parser.add_argument(
        "--query", "-q",
        type=str,
        required=True,
        help="User request to route",
    )
    parser.add_argument(
        "--workers", "-w",
        nargs="*",
        default=[],
        help="Worker names available to the supervisor",
    )
    parser.add_argument(
        "--prompt", "-p",
        type=str,
        default=None,
        help="Custom system prompt (must contain {team_members})",
    )
    parser.add_argument(
        "--deny",
        nargs="*",
        default=None,
        help="Phrases rejected by input moderation",
    )
    args = parser.parse_args(argv)

    try:
        decision = run_single_decision(
            query=args.query,
            workers=args.workers,
            system_prompt=args.prompt,
            deny_list=args.deny,
        )
    except SupervisorError as exc:
        logger.error("Supervisor failed: %s", exc)
        return 1

    print(json.dumps(decision.model_dump(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
