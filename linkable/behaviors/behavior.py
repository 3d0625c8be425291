"""
Behaviors
Yii-style behaviors attached to component classes

A behavior is declared as a class attribute. Reading it from an instance
returns a copy bound to that instance (the owner), so one declaration
serves every instance without sharing state between them:

    class User(Component):
        linkable = LinkableBehavior(default_params=lambda user: {'id': user.id})

    User(id=1).linkable.url_route
    User(id=1).url_route  # Component proxies behavior members
"""
import copy
from typing import Any, List, Optional, Type, TypeVar

B = TypeVar('B', bound='Behavior')


class Behavior:
    """
    Base behavior class

    Subclasses read their owner through ``self.owner``. The owner is only
    set on bound copies; the declared class attribute stays unbound.
    """

    owner: Any = None

    def __set_name__(self, owner_class: type, name: str):
        self._attribute_name = name

    def __get__(self, instance: Any, owner_class: Optional[type] = None):
        if instance is None:
            return self
        return self.attach(instance)

    def attach(self: B, owner: Any) -> B:
        """
        Get a copy of this behavior bound to the given owner

        Args:
            owner: Component instance

        Returns:
            Bound behavior
        """
        bound = copy.copy(self)
        bound.owner = owner
        return bound

    @property
    def is_attached(self) -> bool:
        return self.owner is not None


def behaviors_of(component: Any) -> List[Behavior]:
    """
    Get the behaviors declared on a component's class, bound to the component

    Subclass declarations shadow base class declarations of the same name.

    Args:
        component: Component instance

    Returns:
        List of bound behaviors, most derived class first
    """
    seen = set()
    behaviors = []

    for klass in type(component).__mro__:
        for name, value in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if isinstance(value, Behavior):
                behaviors.append(value.attach(component))

    return behaviors


def find_behavior(component: Any, behavior_class: Type[B]) -> Optional[B]:
    """
    Get the first behavior of exactly the given class, bound to the component

    Args:
        component: Component instance
        behavior_class: Behavior class to look for

    Returns:
        Bound behavior or None
    """
    for behavior in behaviors_of(component):
        if type(behavior) is behavior_class:
            return behavior
    return None


def has_behavior(component: Any, behavior_class: Type[Behavior]) -> bool:
    """Check whether a component carries a behavior of exactly the given class"""
    return find_behavior(component, behavior_class) is not None


class Component:
    """
    Base class for objects that expose their behaviors' members

    Attribute lookups that fail on the component fall through to its
    behaviors, in declaration order:

        user.get_url_route('update')  # same as user.linkable.get_url_route('update')
    """

    def __getattr__(self, name: str) -> Any:
        if not name.startswith('_') and name not in _BEHAVIOR_INTERNALS:
            for behavior in behaviors_of(self):
                if name in dir(type(behavior)) or name in vars(behavior):
                    return getattr(behavior, name)

        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")


_BEHAVIOR_INTERNALS = frozenset(name for name in vars(Behavior) if not name.startswith('_'))
