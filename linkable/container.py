"""
Service Container
Laravel-style container for the services linkable components rely on
"""
import inspect
from typing import Any, Callable, Dict


class Container:
    """
    Minimal service container

    Usage:
        container = Container()
        container.singleton('url_generator', lambda c: UrlGenerator())
        container.bind('url_generator', lambda c: UrlGenerator())  # new instance per make()
        generator = container.make('url_generator')
    """

    def __init__(self):
        self.bindings: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def default(cls) -> 'Container':
        """
        Create a container with the core linkable services bound

        Bindings:
            url_generator: UrlGenerator (singleton)
            html: Html helper (singleton)
        """
        from linkable.http.url import UrlGenerator
        from linkable.support.html import Html

        container = cls()
        container.singleton('url_generator', lambda c: UrlGenerator())
        container.singleton('html', lambda c: Html())
        return container

    def singleton(self, key: str, factory_or_instance):
        """
        Register a singleton binding
        If factory: Will be called once and cached
        If instance: Will be stored directly
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

    def bind(self, key: str, factory: Callable[['Container'], Any]):
        """Register a factory binding (called every time)"""
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """Resolve a binding from the container"""
        if key not in self.bindings:
            raise KeyError(f"Binding '{key}' not found in container")

        binding = self.bindings[key]

        if binding['type'] == 'singleton':
            if binding['instance'] is None:
                binding['instance'] = binding['factory'](self)
            return binding['instance']

        return binding['factory'](self)

    def has(self, key: str) -> bool:
        """
        Check if a binding exists in the container
        """
        return key in self.bindings
