"""ParameterConstraint — a declared requirement on one request parameter."""

from __future__ import annotations

from dataclasses import dataclass, field

from parcon._errors import InvalidConstraintError
from parcon._regex import RegexMatcher
from parcon._types import ParameterLocation


@dataclass(frozen=True, slots=True)
class ParameterConstraint:
    """A named parameter that must (or may) appear in a request location.

    ``location`` accepts a ParameterLocation or its string value
    ("header", "query", "path", "cookie").

    A non-empty ``must_match_regexp`` is compiled here so that a bad
    pattern fails when constraints are loaded, not when requests arrive.

    Raises:
        InvalidConstraintError: empty name or unknown location
        InvalidPatternError: pattern rejected by RE2
        PatternTooLongError: pattern exceeds the length limit
    """

    name: str
    location: ParameterLocation
    required: bool = False
    must_match_regexp: str | None = None
    _matcher: RegexMatcher | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = "constraint requires a non-empty 'name'"
            raise InvalidConstraintError(msg)

        try:
            location = ParameterLocation(self.location)
        except ValueError as e:
            expected = [loc.value for loc in ParameterLocation]
            msg = f"unknown parameter location {self.location!r} (expected one of {expected})"
            raise InvalidConstraintError(msg) from e
        object.__setattr__(self, "location", location)

        matcher = RegexMatcher(self.must_match_regexp) if self.must_match_regexp else None
        object.__setattr__(self, "_matcher", matcher)

    @property
    def matcher(self) -> RegexMatcher | None:
        """Compiled pattern, or None when no pattern is declared."""
        return self._matcher
