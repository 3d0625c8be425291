"""
Middleware Package
"""
from linkable.middleware.base_middleware import Middleware
from linkable.middleware.url_context_middleware import UrlContextMiddleware

__all__ = [
    'Middleware',
    'UrlContextMiddleware',
]
