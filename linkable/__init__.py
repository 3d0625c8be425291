"""
Linkable Package
Model-centric url routes and hotlinks

Export commonly used classes and helpers for easy import
"""

from linkable.behaviors import (
    Behavior,
    Component,
    LinkableBehavior,
    behaviors_of,
    has_behavior,
)
from linkable.exceptions import InvalidRouteException, RoutingConfigurationError
from linkable.http import UrlGenerator, UrlRoute
from linkable.helpers import url, url_route, hotlink

__version__ = '1.0.0'

__all__ = [
    'Behavior',
    'Component',
    'LinkableBehavior',
    'behaviors_of',
    'has_behavior',
    'InvalidRouteException',
    'RoutingConfigurationError',
    'UrlGenerator',
    'UrlRoute',
    'url',
    'url_route',
    'hotlink',
]
