"""
Behaviors Package
"""
from linkable.behaviors.behavior import (
    Behavior,
    Component,
    behaviors_of,
    find_behavior,
    has_behavior,
)
from linkable.behaviors.linkable_behavior import LinkableBehavior

__all__ = [
    'Behavior',
    'Component',
    'behaviors_of',
    'find_behavior',
    'has_behavior',
    'LinkableBehavior',
]
