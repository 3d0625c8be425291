"""
Service Providers
"""
from linkable.providers.service_provider import ServiceProvider
from linkable.providers.linkable_service_provider import LinkableServiceProvider

__all__ = [
    'ServiceProvider',
    'LinkableServiceProvider',
]
