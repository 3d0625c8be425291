"""
HTTP Package
URL generation for linkable routes
"""
from linkable.http.url_route import UrlRoute
from linkable.http.url import UrlGenerator

__all__ = [
    'UrlRoute',
    'UrlGenerator',
]
