"""Configuration-time errors.

Validation itself never raises: violations are returned as messages.
These errors surface when a ParameterConstraint is built from bad input.
"""

from __future__ import annotations


class ConstraintError(Exception):
    """Errors from constraint construction."""


class InvalidConstraintError(ConstraintError):
    """A constraint field was missing or malformed."""


class InvalidPatternError(ConstraintError):
    """A must-match pattern was rejected by the regex engine."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f'invalid regex pattern "{pattern}": {reason}')


class PatternTooLongError(ConstraintError):
    """A must-match pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(
            f"pattern length {length} exceeds maximum {max_}"
        )
