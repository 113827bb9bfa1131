"""parcon.http — HTTP request context.

Provides HttpRequest, a RequestAccessor built from wire-shaped data
(method, raw path with query string, headers, router path parameters).
"""

from parcon.http._request import HttpRequest

__all__ = [
    "HttpRequest",
]
