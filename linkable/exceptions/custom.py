"""
Custom Exception Classes
Linkable-specific exceptions
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all linkable exceptions"""
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class InvalidRouteException(FrameworkException):
    """
    Invalid route exception

    Raised when a cross-link targets a component that does not carry
    the linkable behavior

    Example:
        raise InvalidRouteException('The "LinkableBehavior" is not attached to the specified component')
    """
    message = "The route could not be built"


# Descriptive alias for callers that do not think in framework terms
RoutingConfigurationError = InvalidRouteException
