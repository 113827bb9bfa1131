"""Test utilities for parcon.

Provides a convenience RequestAccessor for use in tests and examples.
This is NOT a web-framework adapter — it exists to reduce boilerplate when
exploring parcon without building a real request.

For real frameworks, implement RequestAccessor over your own request type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parcon._types import Cookie


@dataclass(frozen=True, slots=True)
class StubRequest:
    """A request assembled from plain mappings, with exact-key lookups.

    ``cookie_list=None`` models a request that sent no cookies at all.

    >>> from parcon import ParameterConstraint, validate_constraint
    >>> from parcon.testing import StubRequest
    >>> c = ParameterConstraint("page", "query", required=True)
    >>> validate_constraint(StubRequest(query={"page": "1"}), c) is None
    True
    """

    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    cookie_list: tuple[Cookie, ...] | None = None
    path_params: dict[str, str] = field(default_factory=dict)

    def header(self, name: str, /) -> str | None:
        return self.headers.get(name)

    def query_param(self, name: str, /) -> str | None:
        return self.query.get(name)

    def cookies(self) -> tuple[Cookie, ...] | None:
        return self.cookie_list

    def path_param(self, name: str, /) -> str | None:
        return self.path_params.get(name)
