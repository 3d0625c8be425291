"""
Facades
"""
from linkable.support.facades.facade import Facade
from linkable.support.facades.html import HTML
from linkable.support.facades.url import URL

__all__ = [
    'Facade',
    'HTML',
    'URL',
]
