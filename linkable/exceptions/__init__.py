"""
Exceptions Package
"""
from linkable.exceptions.custom import (
    FrameworkException,
    InvalidRouteException,
    RoutingConfigurationError,
)

__all__ = [
    'FrameworkException',
    'InvalidRouteException',
    'RoutingConfigurationError',
]
