"""
extractor.py

Decision extractor for the supervisor.

Takes the tool invocations parsed from the model response (as produced by
``JsonOutputToolsParser``: ``[{"type": <tool name>, "args": {...}}, ...]``)
and projects the first one into a ``Decision``.
"""

import logging
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from Supervisor.errors import DecisionExtractionError
from Supervisor.state import Decision

logger = logging.getLogger(__name__)


def extract_decision(
    candidates: List[Dict[str, Any]],
    options: Sequence[str],
) -> Decision:
    """Return the decision carried by the first tool invocation.

    Only the first candidate is considered; any others are ignored.

    Raises
    ------
    DecisionExtractionError
        If there are no candidates, the first one is missing ``next`` or
        ``instructions``, or ``next`` is not one of ``options``.
    """
    if not candidates:
        raise DecisionExtractionError("Supervisor model produced no decision")

    if len(candidates) > 1:
        logger.warning(
            "Supervisor model produced %d route calls; using the first",
            len(candidates),
        )

    args = candidates[0].get("args") or {}
    if args.get("reasoning"):
        logger.debug("Supervisor reasoning: %s", args["reasoning"])

    try:
        decision = Decision(
            next=args.get("next"),
            instructions=args.get("instructions"),
        )
    except ValidationError as exc:
        raise DecisionExtractionError(
            f"Supervisor decision is malformed: {args!r}"
        ) from exc

    if decision.next not in options:
        raise DecisionExtractionError(
            f"Supervisor chose '{decision.next}', expected one of: {', '.join(options)}"
        )

    logger.info("Supervisor decision: next=%s", decision.next)
    return decision
