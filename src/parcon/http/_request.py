"""HttpRequest — HTTP request context implementing RequestAccessor.

Holds method, path (without query string), headers (case-insensitive),
query parameters and cookies (parsed from the raw path and the Cookie
header), and optional path parameters resolved by the router.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl

from parcon._types import Cookie


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context for constraint validation.

    The path should be provided as-is from the wire (may include query string).
    Query parameters are automatically parsed and the path is cleaned. When a
    query parameter repeats, the first value wins.

    Headers are stored with lowercased keys for case-insensitive lookup.
    Cookies keep the order and duplicates of the Cookie header.
    """

    method: str = "GET"
    raw_path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    path_params: dict[str, str] = field(default_factory=dict)

    # Computed fields — parsed from raw_path and headers
    _clean_path: str = field(init=False, repr=False)
    _query_params: dict[str, str] = field(init=False, repr=False)
    _lower_headers: dict[str, str] = field(init=False, repr=False)
    _cookies: tuple[Cookie, ...] | None = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Parse query string from path
        if "?" in self.raw_path:
            path, query_string = self.raw_path.split("?", 1)
            params: dict[str, str] = {}
            for k, v in parse_qsl(query_string, keep_blank_values=True):
                params.setdefault(k, v)
            object.__setattr__(self, "_clean_path", path)
            object.__setattr__(self, "_query_params", params)
        else:
            object.__setattr__(self, "_clean_path", self.raw_path)
            object.__setattr__(self, "_query_params", {})

        # Lowercase header keys for case-insensitive lookup
        lower_headers = {k.lower(): v for k, v in self.headers.items()}
        object.__setattr__(self, "_lower_headers", lower_headers)

        cookie_header = lower_headers.get("cookie")
        cookies = _parse_cookie_header(cookie_header) if cookie_header is not None else None
        object.__setattr__(self, "_cookies", cookies)

    @property
    def path(self) -> str:
        """Path without query string."""
        return self._clean_path

    @property
    def query_params(self) -> dict[str, str]:
        """Parsed query parameters."""
        return self._query_params

    def header(self, name: str, /) -> str | None:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())

    def query_param(self, name: str, /) -> str | None:
        """Get a query parameter by name."""
        return self._query_params.get(name)

    def cookies(self) -> tuple[Cookie, ...] | None:
        """Cookies in the order sent, or None if there was no Cookie header."""
        return self._cookies

    def path_param(self, name: str, /) -> str | None:
        """Get a resolved path parameter by name."""
        return self.path_params.get(name)


def _parse_cookie_header(raw: str) -> tuple[Cookie, ...]:
    """Split a Cookie header into name/value pairs.

    Pairs without '=' are skipped. Surrounding double quotes on a value
    are stripped.
    """
    cookies: list[Cookie] = []
    for part in raw.split(";"):
        if "=" not in part:
            continue
        name, value = part.split("=", 1)
        name = name.strip()
        if not name:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        cookies.append(Cookie(name, value))
    return tuple(cookies)
