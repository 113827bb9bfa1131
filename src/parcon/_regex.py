"""RegexMatcher — full-value pattern matching for parameter values.

Regex uses ``google-re2`` for guaranteed linear-time matching. Parameter
values come straight from untrusted requests, so a backtracking engine is
not an option. RE2 does not support backreferences or lookahead/lookbehind
because they require backtracking; patterns using them are rejected at
compile time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import re2

from parcon._errors import InvalidPatternError, PatternTooLongError

MAX_REGEX_PATTERN_LENGTH = 4096


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Regular expression match over the whole value.

    Uses fullmatch, not search: ``\\d+`` accepts ``"12"`` but rejects
    ``"12a"``. The pattern is compiled at construction time.

    Raises:
        PatternTooLongError: If the pattern exceeds MAX_REGEX_PATTERN_LENGTH.
        InvalidPatternError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.pattern) > MAX_REGEX_PATTERN_LENGTH:
            raise PatternTooLongError(len(self.pattern), MAX_REGEX_PATTERN_LENGTH)
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            raise InvalidPatternError(self.pattern, str(e)) from e
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, value: str | None, /) -> bool:
        if not isinstance(value, str):
            return False
        return self._compiled.fullmatch(value) is not None
