"""
Linkable Support Classes
"""

from linkable.support.config import Config
from linkable.support.str import Str
from linkable.support.arr import Arr
from linkable.support.html import Html

__all__ = [
    'Config',
    'Str',
    'Arr',
    'Html',
]
