"""Per-location value lookups over a RequestAccessor.

Each input extracts a single named parameter from the request. Returning
None signals "parameter not present" and short-circuits the pattern check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from parcon._types import ParameterLocation, PathParamAccessor

if TYPE_CHECKING:
    from parcon._types import RequestAccessor


@dataclass(frozen=True, slots=True)
class HeaderInput:
    """Extracts a header value by name.

    Case sensitivity is whatever the accessor provides.
    """

    name: str

    def get(self, request: RequestAccessor, /) -> str | None:
        return request.header(self.name)


@dataclass(frozen=True, slots=True)
class QueryParamInput:
    """Extracts a query parameter value by name."""

    name: str

    def get(self, request: RequestAccessor, /) -> str | None:
        return request.query_param(self.name)


@dataclass(frozen=True, slots=True)
class CookieInput:
    """Extracts the value of the first cookie with this exact name.

    A request that sent no cookies at all is the same as one that sent
    other cookies only.
    """

    name: str

    def get(self, request: RequestAccessor, /) -> str | None:
        for cookie in request.cookies() or ():
            if cookie.name == self.name:
                return cookie.value
        return None


@dataclass(frozen=True, slots=True)
class PathParamInput:
    """Extracts a resolved path template parameter by name.

    Only requests implementing PathParamAccessor carry path parameters.
    """

    name: str

    def get(self, request: RequestAccessor, /) -> str | None:
        if not isinstance(request, PathParamAccessor):
            return None
        return request.path_param(self.name)


ParameterInput: TypeAlias = HeaderInput | QueryParamInput | CookieInput | PathParamInput


def input_for(location: ParameterLocation, name: str) -> ParameterInput:
    """Return the lookup for a parameter in the given location."""
    match location:
        case ParameterLocation.HEADER:
            return HeaderInput(name)
        case ParameterLocation.QUERY:
            return QueryParamInput(name)
        case ParameterLocation.COOKIE:
            return CookieInput(name)
        case ParameterLocation.PATH:
            return PathParamInput(name)
        case _:  # pragma: no cover
            msg = f"Unknown parameter location: {location}"
            raise ValueError(msg)
