"""
URL Generator
Generates URLs from linkable routes and paths (Laravel-style)
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

from linkable.http.url_route import UrlRoute
from linkable.logging import getLogger

logger = getLogger(__name__)


class UrlGenerator:
    """
    Usage:
        generator = UrlGenerator()
        generator.to(UrlRoute('/users/view', {'id': 1}))  # /users/view?id=1
        generator.to('/users', {'page': 2}, absolute=True)  # https://example.com/users?page=2
    """

    def __init__(self, root_url: Optional[str] = None):
        """
        Initialize URL generator

        Args:
            root_url: Root URL (scheme + host) used for absolute URLs
        """
        self._forced_scheme: Optional[str] = None
        self._forced_root: Optional[str] = None
        if root_url:
            self.force_root_url(root_url)

    def to(
        self,
        route: Union[UrlRoute, str],
        parameters: Optional[Mapping[str, Any]] = None,
        absolute: bool = False
    ) -> str:
        """
        Generate a URL for a route or path

        Args:
            route: UrlRoute, or a plain URI path
            parameters: Query parameters (merged over the route's own)
            absolute: Prefix with scheme and host

        Returns:
            URL string
        """
        if isinstance(route, UrlRoute):
            path, route_params = route
            params = {**route_params, **(parameters or {})}
        else:
            path, params = route, dict(parameters or {})

        # Route paths are never full urls, only plain string paths can be
        if not isinstance(route, UrlRoute) and self.is_valid_url(path):
            uri = path
        else:
            uri = '/' + path.lstrip('/')

        query_string = self.build_query(params)
        if query_string:
            uri = f"{uri}?{query_string}"

        if absolute and not self.is_valid_url(uri):
            root = self._get_root_url()
            if root:
                return f"{root}{uri}"
            logger.debug("No root URL available, generating relative URL for %s", uri)

        return uri

    def build_query(self, parameters: Mapping[str, Any]) -> str:
        """
        Build a query string

        None values are skipped, lists repeat the key and nested dicts
        use bracket keys (filter[status]=1).

        Args:
            parameters: Query parameters

        Returns:
            Encoded query string
        """
        return urlencode(self._flatten(parameters), doseq=True)

    def _flatten(self, parameters: Mapping[str, Any], prefix: Optional[str] = None) -> List[Tuple[str, Any]]:
        """Flatten nested parameters into (key, value) pairs"""
        pairs: List[Tuple[str, Any]] = []

        for key, value in parameters.items():
            name = f"{prefix}[{key}]" if prefix else str(key)

            if value is None:
                continue
            if isinstance(value, Mapping):
                pairs.extend(self._flatten(value, name))
            elif isinstance(value, bool):
                pairs.append((name, int(value)))
            elif isinstance(value, (list, tuple)):
                pairs.append((name, [item for item in value if item is not None]))
            else:
                pairs.append((name, value))

        return pairs

    def _get_scheme(self) -> str:
        """
        Get URL scheme (http/https)

        Returns:
            Scheme string
        """
        if self._forced_scheme:
            return self._forced_scheme

        from linkable.support.facades import Facade
        request = Facade.get_current_request()
        return getattr(request, 'scheme', None) or 'http'

    def _get_root_url(self) -> str:
        """
        Get root URL (scheme + host)

        Resolution order: forced root, app.URL config, current request

        Returns:
            Root URL or ''
        """
        if self._forced_root:
            return self._forced_root

        from linkable.support import Config
        configured = Config.get('app.URL')
        if configured:
            return str(configured).rstrip('/')

        from linkable.support.facades import Facade
        request = Facade.get_current_request()
        host = getattr(request, 'host', None) if request is not None else None
        if host:
            return f"{self._get_scheme()}://{host}"

        return ''

    def force_scheme(self, scheme: str):
        """
        Force URL scheme for request-derived root URLs

        Args:
            scheme: URL scheme (http or https)
        """
        self._forced_scheme = scheme

    def force_root_url(self, root: str):
        """
        Force root URL for generated URLs

        Args:
            root: Root URL (e.g., 'https://example.com')
        """
        self._forced_root = root.rstrip('/')

    def is_valid_url(self, path: str) -> bool:
        """
        Check if a path is already a full URL

        Args:
            path: Path to check

        Returns:
            True if valid URL
        """
        return path.startswith(('http://', 'https://', '//'))
