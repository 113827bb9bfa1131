"""Core protocols and value types for parcon.

- ParameterLocation is the tag that selects where a parameter is looked up
- RequestAccessor is the read-only port over an inbound request
- PathParamAccessor is the optional port for resolved path templates
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


class ParameterLocation(StrEnum):
    """Where a constrained parameter lives in the request.

    Values match the ``in`` field of OpenAPI parameter objects.
    """

    HEADER = "header"
    QUERY = "query"
    PATH = "path"
    COOKIE = "cookie"


@dataclass(frozen=True, slots=True)
class Cookie:
    """A single cookie as delivered by the client."""

    name: str
    value: str


@runtime_checkable
class RequestAccessor(Protocol):
    """Read-only view over an inbound request.

    Implementations wrap whatever the web framework provides. Lookups
    return None when the parameter is not present.
    """

    def header(self, name: str, /) -> str | None: ...

    def query_param(self, name: str, /) -> str | None: ...

    def cookies(self) -> Sequence[Cookie] | None: ...


@runtime_checkable
class PathParamAccessor(Protocol):
    """Requests that know their matched path template implement this.

    Requests without it report every path parameter as absent.
    """

    def path_param(self, name: str, /) -> str | None: ...
