"""
URL Facade
Generate URLs for linkable routes and paths
"""
from linkable.support.facades.facade import Facade


class URL(Facade):
    """
    URL Generation Facade

    Provides Laravel-style URL generation using the UrlGenerator service.
    Uses the current request for absolute URLs when no root is configured.

    Usage:
        from linkable.support.facades import URL

        URL.to(user.url_route)
        URL.to(user.url_route, absolute=True)
        URL.to('/users', {'page': 2})
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        """Get the registered name of the component"""
        return 'url_generator'
