"""
Helper Functions
Global helper functions for building urls and hotlinks
"""
from typing import Any, Dict, Optional, Union

from linkable.http.url_route import UrlRoute


# ==============================================================================
# URL Helpers
# ==============================================================================

def url(route: Union[UrlRoute, str], parameters: Optional[Dict[str, Any]] = None, absolute: bool = False) -> str:
    """
    Generate URL for a route or path

    Args:
        route: UrlRoute or URI path
        parameters: Query parameters
        absolute: Generate absolute URL

    Returns:
        Generated URL

    Example:
        url(user.url_route)  # /users/view?id=1
        url('/users', {'page': 2})
    """
    from linkable.support.facades import URL
    return URL.to(route, parameters, absolute=absolute)


def url_route(component: Any, action: Optional[str] = None, params: Optional[Dict[str, Any]] = None) -> UrlRoute:
    """
    Get the url route of a linkable component

    Raises:
        InvalidRouteException: If the component is not linkable
    """
    return _linkable(component).get_url_route(action, params)


def hotlink(
    component: Any,
    action: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    options: Optional[Dict[str, Any]] = None
) -> str:
    """
    Render the hotlink of a linkable component

    Example:
        hotlink(user, options={'class': 'user-link'})

    Raises:
        InvalidRouteException: If the component is not linkable
    """
    return _linkable(component).get_hotlink(action, params, options)


def _linkable(component: Any):
    from linkable.behaviors import LinkableBehavior, find_behavior
    from linkable.exceptions import InvalidRouteException

    behavior = find_behavior(component, LinkableBehavior)
    if behavior is None:
        raise InvalidRouteException(
            'The "LinkableBehavior" is not attached to the specified component'
        )
    return behavior
