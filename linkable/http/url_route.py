"""
URL Route
The path + parameters pair produced by linkable components
"""
from typing import Any, Dict, NamedTuple


class UrlRoute(NamedTuple):
    """
    A route without scheme or host, ready for the URL generator

    Unpacks like a pair:
        path, params = user.url_route
    """

    path: str
    params: Dict[str, Any]

    def __str__(self) -> str:
        from linkable.support.facades import URL
        return URL.to(self)
