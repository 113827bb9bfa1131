"""parcon — request parameter constraint validation.

All public types are exported from this module for flat imports:

    from parcon import ParameterConstraint, ParameterLocation, validate_constraint
"""

__version__ = "0.1.0"

# Constraint
from parcon._constraint import ParameterConstraint

# Errors
from parcon._errors import (
    ConstraintError,
    InvalidConstraintError,
    InvalidPatternError,
    PatternTooLongError,
)

# Lookups
from parcon._inputs import (
    CookieInput,
    HeaderInput,
    ParameterInput,
    PathParamInput,
    QueryParamInput,
    input_for,
)

# Matching
from parcon._regex import MAX_REGEX_PATTERN_LENGTH, RegexMatcher

# Protocols
from parcon._types import Cookie, ParameterLocation, PathParamAccessor, RequestAccessor

# Validation
from parcon._validator import validate_constraint

__all__ = [
    # Protocols and value types
    "Cookie",
    "ParameterLocation",
    "PathParamAccessor",
    "RequestAccessor",
    # Constraint
    "ParameterConstraint",
    # Lookups
    "HeaderInput",
    "QueryParamInput",
    "CookieInput",
    "PathParamInput",
    "ParameterInput",
    "input_for",
    # Matching
    "RegexMatcher",
    "MAX_REGEX_PATTERN_LENGTH",
    # Validation
    "validate_constraint",
    # Errors
    "ConstraintError",
    "InvalidConstraintError",
    "InvalidPatternError",
    "PatternTooLongError",
]
