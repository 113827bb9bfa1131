"""Constraint validation — check one request against one ParameterConstraint.

Evaluation semantics:
- The parameter is looked up in the constraint's location only
- An absent parameter is a violation iff the constraint is required
- The pattern is never checked against an absent value
- A present value must fully match the pattern, when one is declared

Violations are returned as messages, never raised, so callers can run
many checks and collect the results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from parcon._inputs import input_for

if TYPE_CHECKING:
    from parcon._constraint import ParameterConstraint
    from parcon._types import RequestAccessor

logger = structlog.get_logger()


def validate_constraint(
    request: RequestAccessor, constraint: ParameterConstraint
) -> str | None:
    """Validate a request against a single parameter constraint.

    Returns None if the constraint is satisfied, otherwise a
    human-readable violation message.
    """
    value = input_for(constraint.location, constraint.name).get(request)

    if value is None:
        if not constraint.required:
            return None
        logger.debug(
            "parameter_missing",
            name=constraint.name,
            location=constraint.location.value,
        )
        return f"Parameter {constraint.name} is required"

    matcher = constraint.matcher
    if matcher is None or matcher.matches(value):
        return None

    logger.debug(
        "parameter_mismatch",
        name=constraint.name,
        location=constraint.location.value,
        pattern=matcher.pattern,
    )
    return f"Parameter {constraint.name} should match {matcher.pattern}"
