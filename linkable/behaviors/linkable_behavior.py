"""
Linkable Behavior
Centralizes the URL routes of a component

LinkableBehavior derives the url route of a component from its class
name and attributes, so links to a model are defined in one place
instead of throughout the templates.

Configure ``route`` without the action. A basic controller route
``/user/view`` is just ``/user`` and a module route
``/product/review/view`` is ``/product/review``. Parameters come from
``default_params``, either a dict or a callable applied to the owner:

    class Article(Component):
        linkable = LinkableBehavior(
            route='/article',
            default_params=lambda article: {'id': article.id, 'slug': article.slug},
        )
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union

from linkable.behaviors.behavior import Behavior, find_behavior
from linkable.defaults import (
    DEFAULT_ACTION,
    DEFAULT_HOTLINK_TAG,
    DEFAULT_ROUTE_SEPARATOR,
    DEFAULT_USE_ABSOLUTE_URL,
)
from linkable.exceptions import InvalidRouteException
from linkable.http.url_route import UrlRoute
from linkable.logging import getLogger
from linkable.support import Arr, Config, Str
from linkable.support.facades import HTML, URL

logger = getLogger(__name__)

Params = Union[Mapping[str, Any], Callable[[Any], Mapping[str, Any]]]


class LinkableBehavior(Behavior):
    """
    Provides url routes and hotlinks for the owning component

    Example (User has id 123, its Photo has id 456):
        user.url_route                       # ('/users/view', {'id': 123})
        user.get_url_route('update')         # ('/users/update', {'id': 123})
        user.get_url_route_to(photo)         # ('/users/photos/view', {'id': 123, 'pid': 456})
        photo.get_url_route_to(user)         # ('/photos/users/view', {'id': 456, 'uid': 123})
        user.hotlink                         # <a href="/users/view?id=123">/users/view?id=123</a>
    """

    def __init__(
        self,
        route: Optional[str] = None,
        default_action: Optional[str] = None,
        default_params: Optional[Params] = None,
        linkable_params: Optional[Params] = None,
        hotlink_text_attr: Optional[str] = None,
        disable_hotlink: bool = False,
        use_absolute_url: Optional[bool] = None,
    ):
        """
        Args:
            route: Route without the action. Derived from the owner's
                class name when not set (User => /users).
            default_action: Action used when none is given (default 'view')
            default_params: Parameters used when creating the route. A
                callable is applied on the owner.
            linkable_params: Parameters used when another component links
                to this one. When empty, the default parameters prefixed
                with the first letter of the class name are used.
            hotlink_text_attr: Owner attribute (dot notation allowed) used
                as hotlink text. The url itself is used when not set.
            disable_hotlink: Render a span instead of an anchor
            use_absolute_url: Use an absolute url as hotlink text
        """
        self._route = route
        self._default_action = default_action
        self._default_params = default_params if default_params is not None else {}
        self._linkable_params = linkable_params if linkable_params is not None else {}
        self.hotlink_text_attr = hotlink_text_attr
        self.disable_hotlink = disable_hotlink
        self._use_absolute_url = use_absolute_url

    @property
    def default_action(self) -> str:
        if self._default_action:
            return self._default_action
        return Config.get('linkable.DEFAULT_ACTION', DEFAULT_ACTION)

    @default_action.setter
    def default_action(self, action: str):
        self._default_action = action

    @property
    def use_absolute_url(self) -> bool:
        if self._use_absolute_url is not None:
            return self._use_absolute_url
        return bool(Config.get('linkable.USE_ABSOLUTE_URL', DEFAULT_USE_ABSOLUTE_URL))

    @use_absolute_url.setter
    def use_absolute_url(self, value: bool):
        self._use_absolute_url = value

    @property
    def route(self) -> str:
        """
        Route of the owner, with a single leading separator

        Returns:
            The configured route trimmed of separators, or the pluralized
            lower-cased base class name of the owner
        """
        if self._route is None:
            segment = Str.plural(Str.lower(self._owner_base_name()))
        else:
            segment = Str.trim(self._route, DEFAULT_ROUTE_SEPARATOR)

        return f"{DEFAULT_ROUTE_SEPARATOR}{segment}"

    @route.setter
    def route(self, route: Optional[str]):
        self._route = route

    @property
    def default_params(self) -> Dict[str, Any]:
        return self.get_default_params()

    @default_params.setter
    def default_params(self, params: Params):
        self._default_params = params

    @property
    def linkable_params(self) -> Dict[str, Any]:
        return self.get_linkable_params()

    @linkable_params.setter
    def linkable_params(self, params: Params):
        self._linkable_params = params

    def get_default_params(self) -> Dict[str, Any]:
        """
        Returns:
            Default parameters for the owner
        """
        return self.parse_params(self._default_params)

    def get_linkable_params(self) -> Dict[str, Any]:
        """
        Parameters this component contributes when it is the target of a link

        Returns:
            The configured linkable parameters, or the default parameters
            with every key prefixed by the lower-cased first letter of the
            owner's class name
        """
        params = self.parse_params(self._linkable_params)

        if not params:
            prefix = Str.lower(self._owner_base_name()[:1])
            params = Arr.prefix_keys(self.get_default_params(), prefix)

        return params

    @property
    def url_route(self) -> UrlRoute:
        return self.get_url_route()

    def get_url_route(self, action: Optional[str] = None, params: Optional[Mapping[str, Any]] = None) -> UrlRoute:
        """
        Returns the url route for the owner

        Example:
            URL.to(user.url_route)                                    # /users/view?id=123
            URL.to(user.get_url_route('update'))                      # /users/update?id=123
            URL.to(user.get_url_route('profile', {'ref': 'x'}), absolute=True)
            # http://www.example.com/users/profile?id=123&ref=x

        Args:
            action: Action to use instead of default_action
            params: Additional parameters, merged over (and overriding)
                the default parameters

        Returns:
            UrlRoute
        """
        path = DEFAULT_ROUTE_SEPARATOR + self._join_segments(self.route, action or self.default_action)
        route = UrlRoute(path, Arr.merge(self.get_default_params(), params))

        logger.debug("Built url route %s for %s", path, type(self.owner).__name__)
        return route

    def get_url_route_to(self, component: Any, action: Optional[str] = None) -> UrlRoute:
        """
        Returns the url route which links to another linkable component

        The target route is nested under this component's route and the
        target's linkable parameters are added to this component's
        default parameters:

            user.get_url_route_to(photo)            # /users/photos/view?id=123&pid=456
            photo.get_url_route_to(user)            # /photos/users/view?id=456&uid=123
            user.get_url_route_to(photo, 'update')  # /users/photos/update?id=123&pid=456

        Args:
            component: Component to link to, or its bound behavior
            action: Action to use instead of the target's default_action

        Returns:
            UrlRoute

        Raises:
            InvalidRouteException: If the component does not carry this behavior
        """
        target = self._resolve_target(component)

        return self.get_url_route(
            self._target_action(target, action),
            target.get_linkable_params()
        )

    @property
    def hotlink(self) -> str:
        return self.get_hotlink()

    def get_hotlink(
        self,
        action: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Returns the hotlink to this component's route

        The text comes from hotlink_text_attr, or is the url itself (absolute
        when use_absolute_url is set). A missing text renders empty. The href
        is always the relative url. If disable_hotlink is set, a span is
        rendered instead of an anchor.

        Args:
            action: Action to use instead of default_action
            params: Additional parameters (see get_url_route)
            options: HTML attributes of the rendered tag

        Returns:
            Rendered hotlink
        """
        route = self.get_url_route(action, params)

        if self.hotlink_text_attr is None:
            text = URL.to(route, absolute=self.use_absolute_url)
        else:
            text = Arr.get(self.owner, self.hotlink_text_attr)

        if text is None:
            text = ''

        if self.disable_hotlink:
            return HTML.tag(Config.get('linkable.HOTLINK_TAG', DEFAULT_HOTLINK_TAG), text, options)

        return HTML.a(text, route, options)

    def get_hotlink_to(
        self,
        component: Any,
        action: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Returns the hotlink to the route linking to another component

        Args:
            component: Component to link to, or its bound behavior
            action: Action to use instead of the target's default_action
            params: Additional parameters, merged over the target's
                linkable parameters
            options: HTML attributes of the rendered tag

        Returns:
            Rendered hotlink

        Raises:
            InvalidRouteException: If the component does not carry this behavior
        """
        target = self._resolve_target(component)

        return self.get_hotlink(
            self._target_action(target, action),
            Arr.merge(target.get_linkable_params(), params),
            options
        )

    def parse_params(self, params: Params) -> Dict[str, Any]:
        """
        Parses the params to ensure correct parameters are used

        Args:
            params: Mapping, or a callable applied on the owner. The
                callable's result is returned as-is and its exceptions
                propagate.

        Returns:
            The list of parameters
        """
        if callable(params):
            return params(self.owner)

        return params

    def _owner_base_name(self) -> str:
        return Str.base_name(type(self.owner).__qualname__)

    def _resolve_target(self, component: Any) -> 'LinkableBehavior':
        """Get the bound behavior of the link target"""
        if isinstance(component, Behavior):
            if type(component) is type(self) and component.is_attached:
                return component
            component = component.owner

        target = find_behavior(component, type(self)) if component is not None else None

        if target is None:
            logger.warning(
                "Cannot link %s to %s: behavior not attached",
                type(self.owner).__name__,
                type(component).__name__
            )
            raise InvalidRouteException(
                f'The "{type(self).__name__}" is not attached to the specified component'
            )

        return target

    def _target_action(self, target: 'LinkableBehavior', action: Optional[str]) -> str:
        """Action path of a link target: {target route}/{action}"""
        return self._join_segments(target.route, action or target.default_action)

    def _join_segments(self, *segments: str) -> str:
        """Join path segments with single separators, skipping empty ones"""
        parts = (Str.trim(segment, DEFAULT_ROUTE_SEPARATOR) for segment in segments)
        return DEFAULT_ROUTE_SEPARATOR.join(part for part in parts if part)
