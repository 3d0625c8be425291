"""
Facade System
Laravel-style facade pattern for static-like access to services
"""
from typing import Any, Optional
from contextvars import ContextVar

# Global container instance storage
_app_instance: Optional[Any] = None

# Context-aware request storage (safe for async)
_current_request: ContextVar[Optional[Any]] = ContextVar('current_request', default=None)


class FacadeMeta(type):
    """Metaclass for Facade to proxy class attribute access"""

    def __getattr__(cls, name: str) -> Any:
        """
        Magic method to proxy attribute/method access to the facade root

        Args:
            name: Attribute/method name

        Returns:
            Attribute or method from underlying instance
        """
        if name.startswith('__'):
            raise AttributeError(name)
        instance = cls.get_facade_root()
        return getattr(instance, name)


class Facade(metaclass=FacadeMeta):
    """
    Base Facade class

    Provides Laravel-style static access to underlying service instances.
    Subclasses must implement get_facade_accessor() to specify which
    service to resolve from the container.

    Example:
        class URL(Facade):
            @classmethod
            def get_facade_accessor(cls):
                return 'url_generator'

        # Usage:
        URL.to(user.url_route)
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        """
        Get the accessor name for the facade

        Returns:
            Service name to resolve from container

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError(
            f"Facade {cls.__name__} does not implement get_facade_accessor()"
        )

    @classmethod
    def get_facade_root(cls) -> Any:
        """
        Get the root object behind the facade

        Returns:
            The underlying service instance

        Raises:
            RuntimeError: If no container is available
        """
        accessor = cls.get_facade_accessor()

        app = cls.get_app()

        if not app:
            raise RuntimeError(
                f"Facade {cls.__name__} cannot access the container. "
                "Make sure to call Facade.set_app(container) during bootstrap."
            )

        return app.make(accessor)

    @classmethod
    def get_app(cls):
        """
        Get the container instance

        A default container is created on first use so that facades
        work without an explicit bootstrap.

        Returns:
            Container instance
        """
        global _app_instance
        if _app_instance is None:
            from linkable.container import Container
            _app_instance = Container.default()
        return _app_instance

    @classmethod
    def set_app(cls, app):
        """
        Set the container instance (called during bootstrap)

        Args:
            app: Container instance, or None to fall back to the default
        """
        global _app_instance
        _app_instance = app

    @classmethod
    def get_current_request(cls):
        """
        Get the current request from context

        Returns:
            Current request or None
        """
        return _current_request.get()

    @classmethod
    def set_current_request(cls, request: Any):
        """
        Set the current request in context (for request-scoped URL roots)

        Args:
            request: Sanic request object
        """
        if request is None:
            raise RuntimeError("No active request context.")

        _current_request.set(request)

    @classmethod
    def clear_current_request(cls):
        """Clear the current request from context"""
        _current_request.set(None)
