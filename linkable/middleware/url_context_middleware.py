"""
URL Context Middleware
Publishes the current Sanic request so absolute urls use its scheme and host
"""
from typing import Any

from sanic import Request

from linkable.middleware.base_middleware import Middleware
from linkable.support.facades import Facade


class UrlContextMiddleware(Middleware):
    """
    Stores the request in the facade request context for the duration
    of the request

    Enabled through the linkable.URL_CONTEXT_MIDDLEWARE config key
    (default: enabled).
    """

    ENABLED_CONFIG_KEY = 'linkable.URL_CONTEXT_MIDDLEWARE'
    DEFAULT_ENABLED = True

    async def before_request(self, request: Request):
        Facade.set_current_request(request)

    async def after_response(self, request: Request, response: Any):
        Facade.clear_current_request()
        return None
