"""
Base Middleware Class
Abstract base class for Sanic middlewares
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from sanic import Request


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach routes
    - Inspect/modify responses before they're sent
    - Short-circuit requests (return response early)

    Configuration:
    Subclasses can set these class variables for automatic configuration:
    - ENABLED_CONFIG_KEY: Config key to check if middleware is enabled
    - DEFAULT_ENABLED: Default enabled state if config key not found
    """

    ENABLED_CONFIG_KEY: str = None
    DEFAULT_ENABLED: bool = True

    @classmethod
    def _is_enabled(cls) -> bool:
        """
        Hook for custom enabled check logic

        Returns:
            True if middleware should be enabled
        """
        from linkable.support import Config

        if cls.ENABLED_CONFIG_KEY:
            return Config.get(cls.ENABLED_CONFIG_KEY, cls.DEFAULT_ENABLED)

        return cls.DEFAULT_ENABLED

    @classmethod
    def _register_middleware(cls) -> Optional['Middleware']:
        """
        Factory method to create middleware instance from configuration

        Returns:
            Middleware instance if enabled, None otherwise
        """
        if not cls._is_enabled():
            return None

        return cls()

    def register(self, sanic_app):
        """
        Attach this middleware to a Sanic app

        Args:
            sanic_app: Sanic application
        """
        sanic_app.register_middleware(self.before_request, 'request')
        sanic_app.register_middleware(self.after_response, 'response')

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Args:
            request: The Sanic request object

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass

    async def after_response(self, request: Request, response: Any):
        """
        Called after the route handler, before sending response

        Args:
            request: The Sanic request object
            response: The response object

        Returns:
            None to keep the response unchanged
        """
        return None
