"""
Service Provider Base Class
Laravel-style service providers for registering services and bootstrapping
"""
from abc import ABC
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from sanic import Sanic
    from linkable.container import Container


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers register services in the container and then boot
    them against the Sanic application.
    """

    def __init__(self, sanic_app: 'Sanic', container: Optional['Container'] = None):
        from linkable.support.facades import Facade

        self.sanic_app = sanic_app
        self.container = container if container is not None else Facade.get_app()

    def register(self):
        """
        Register services in the container
        Called when the provider is registered (before booting)
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)
        """
        pass
