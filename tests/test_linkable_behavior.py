"""Tests for LinkableBehavior: routes, cross-links and hotlinks."""

import pytest

from linkable.behaviors import Component, LinkableBehavior
from linkable.exceptions import InvalidRouteException, RoutingConfigurationError
from linkable.http import UrlRoute
from linkable.support import Config
from linkable.support.facades import URL

from conftest import Photo, User


class Category(Component):
    linkable = LinkableBehavior()


class Article(Component):
    linkable = LinkableBehavior(
        route='/blog/article/',
        default_action='read',
        default_params={'lang': 'en'},
    )


class Home(Component):
    linkable = LinkableBehavior(route='/')


class Plain:
    """Not linkable."""

    id = 1


class TestRoute:
    """Route segment resolution."""

    def test_derived_from_class_name(self, user: User) -> None:
        assert user.linkable.route == '/users'

    def test_pluralizes_y_ending(self) -> None:
        assert Category().linkable.route == '/categories'

    def test_explicit_route_is_trimmed(self) -> None:
        assert Article().linkable.route == '/blog/article'

    def test_nested_class_uses_last_component(self) -> None:
        class Outer:
            class Person(Component):
                linkable = LinkableBehavior()

        assert Outer.Person().linkable.route == '/people'

    def test_route_setter(self, user: User) -> None:
        behavior = user.linkable
        behavior.route = 'members/'
        assert behavior.route == '/members'

    def test_root_route(self) -> None:
        assert Home().linkable.route == '/'


class TestParams:
    """Default and linkable parameters."""

    def test_callable_default_params(self, user: User) -> None:
        assert user.linkable.get_default_params() == {'id': 123}

    def test_static_default_params(self) -> None:
        assert Article().linkable.default_params == {'lang': 'en'}

    def test_callable_result_returned_as_is(self) -> None:
        class Thing(Component):
            linkable = LinkableBehavior(default_params=lambda thing: {'tags': ['a'], 'x': None})

        assert Thing().linkable.default_params == {'tags': ['a'], 'x': None}

    def test_callable_errors_propagate(self) -> None:
        def explode(owner):
            raise LookupError('no id')

        class Broken(Component):
            linkable = LinkableBehavior(default_params=explode)

        with pytest.raises(LookupError, match='no id'):
            Broken().linkable.get_url_route()

    def test_linkable_params_prefixed_fallback(self, photo: Photo) -> None:
        assert photo.linkable.get_linkable_params() == {'pid': 456}

    def test_linkable_params_empty_defaults(self) -> None:
        assert Category().linkable.linkable_params == {}

    def test_empty_callable_linkable_params_fall_back(self) -> None:
        class Tag(Component):
            linkable = LinkableBehavior(
                default_params=lambda tag: {'id': 3},
                linkable_params=lambda tag: {},
            )

        assert Tag().linkable.linkable_params == {'tid': 3}

    def test_explicit_linkable_params_not_prefixed(self) -> None:
        class Tag(Component):
            linkable = LinkableBehavior(
                default_params=lambda tag: {'id': tag.id},
                linkable_params=lambda tag: {'tag': tag.slug},
            )
            id = 9
            slug = 'python'

        assert Tag().linkable.linkable_params == {'tag': 'python'}

    def test_params_read_at_call_time(self, user: User) -> None:
        behavior = user.linkable
        user.id = 124
        assert behavior.default_params == {'id': 124}


class TestUrlRoute:
    """get_url_route()."""

    def test_default_route(self, user: User) -> None:
        assert user.linkable.url_route == UrlRoute('/users/view', {'id': 123})

    def test_action(self, user: User) -> None:
        path, params = user.linkable.get_url_route('update')
        assert path == '/users/update'
        assert params == {'id': 123}

    def test_extra_params_merge_and_override(self, user: User) -> None:
        route = user.linkable.get_url_route('profile', {'ref': 'facebook', 'id': 7})
        assert route.params == {'id': 7, 'ref': 'facebook'}

    def test_list_params_are_concatenated(self) -> None:
        class Post(Component):
            linkable = LinkableBehavior(default_params={'tags': ['a']})

        assert Post().linkable.get_url_route(params={'tags': ['b']}).params == {'tags': ['a', 'b']}

    def test_root_route_has_single_slash(self) -> None:
        route = Home().linkable.url_route
        assert route.path == '/view'
        assert URL.to(route) == '/view'

    def test_empty_route_has_single_slash(self) -> None:
        class Landing(Component):
            linkable = LinkableBehavior(route='')

        assert Landing().linkable.get_url_route('index').path == '/index'

    def test_root_route_absolute(self) -> None:
        Config.set('app.URL', 'https://example.com')
        assert URL.to(Home().linkable.url_route, absolute=True) == 'https://example.com/view'

    def test_configured_default_action(self) -> None:
        assert Article().linkable.url_route.path == '/blog/article/read'

    def test_global_default_action(self, user: User) -> None:
        Config.set('linkable.DEFAULT_ACTION', 'show')
        assert user.linkable.url_route.path == '/users/show'

    def test_repeated_calls_are_equal(self, user: User) -> None:
        assert user.linkable.get_url_route('x', {'a': 1}) == user.linkable.get_url_route('x', {'a': 1})

    def test_default_params_not_mutated(self) -> None:
        defaults = {'tags': ['a']}

        class Post(Component):
            linkable = LinkableBehavior(default_params=defaults)

        Post().linkable.get_url_route(params={'tags': ['b'], 'page': 2})
        assert defaults == {'tags': ['a']}


class TestUrlRouteTo:
    """Cross-linking routes."""

    def test_user_to_photo(self, user: User, photo: Photo) -> None:
        assert user.linkable.get_url_route_to(photo) == UrlRoute('/users/photos/view', {'id': 123, 'pid': 456})

    def test_photo_to_user(self, user: User, photo: Photo) -> None:
        assert photo.linkable.get_url_route_to(user) == UrlRoute('/photos/users/view', {'id': 456, 'uid': 123})

    def test_action(self, user: User, photo: Photo) -> None:
        assert user.linkable.get_url_route_to(photo, 'update').path == '/users/photos/update'

    def test_uses_target_default_action(self, user: User) -> None:
        route = user.linkable.get_url_route_to(Article())
        assert route.path == '/users/blog/article/read'
        assert route.params == {'id': 123, 'alang': 'en'}

    def test_accepts_bound_behavior(self, user: User, photo: Photo) -> None:
        assert user.linkable.get_url_route_to(photo.linkable).path == '/users/photos/view'

    def test_error_carries_default_message(self) -> None:
        error = InvalidRouteException()
        assert error.message == 'The route could not be built'
        assert not hasattr(error, 'status_code')

    def test_root_route_target(self, user: User) -> None:
        assert user.linkable.get_url_route_to(Home()) == UrlRoute('/users/view', {'id': 123})

    def test_root_route_source(self, photo: Photo) -> None:
        assert Home().linkable.get_url_route_to(photo).path == '/photos/view'

    def test_target_without_behavior(self, user: User) -> None:
        with pytest.raises(InvalidRouteException, match='not attached'):
            user.linkable.get_url_route_to(Plain())

    def test_target_with_other_behavior_class(self, user: User) -> None:
        class CustomLinkable(LinkableBehavior):
            pass

        class Document(Component):
            linkable = CustomLinkable()

        with pytest.raises(RoutingConfigurationError):
            user.linkable.get_url_route_to(Document())


class TestHotlink:
    """Hotlink rendering."""

    def test_url_as_text(self, user: User) -> None:
        assert user.linkable.hotlink == '<a href="/users/view?id=123">/users/view?id=123</a>'

    def test_text_attribute_and_options(self) -> None:
        class Member(Component):
            linkable = LinkableBehavior(
                default_params=lambda member: {'id': member.id},
                hotlink_text_attr='name',
            )
            id = 5
            name = 'Ann <admin>'

        assert Member().linkable.get_hotlink(options={'class': 'member'}) == (
            '<a href="/members/view?id=5" class="member">Ann &lt;admin&gt;</a>'
        )

    def test_dotted_text_attribute(self) -> None:
        class Profile:
            display = 'Ann'

        class Author(Component):
            linkable = LinkableBehavior(hotlink_text_attr='profile.display')
            profile = Profile()

        assert Author().linkable.hotlink == '<a href="/authors/view">Ann</a>'

    def test_disabled_hotlink_renders_span(self) -> None:
        class Member(Component):
            linkable = LinkableBehavior(hotlink_text_attr='name', disable_hotlink=True)
            name = 'Ann'

        assert Member().linkable.get_hotlink(options={'id': 'm1'}) == '<span id="m1">Ann</span>'

    def test_absolute_url(self, user: User) -> None:
        Config.set('app.URL', 'https://example.com/')
        behavior = user.linkable
        behavior.use_absolute_url = True
        assert behavior.hotlink == (
            '<a href="/users/view?id=123">https://example.com/users/view?id=123</a>'
        )

    def test_missing_text_renders_empty_span(self) -> None:
        class Member(Component):
            linkable = LinkableBehavior(hotlink_text_attr='nickname', disable_hotlink=True)
            nickname = None

        assert Member().linkable.hotlink == '<span></span>'

    def test_missing_text_renders_empty_anchor(self) -> None:
        class Member(Component):
            linkable = LinkableBehavior(hotlink_text_attr='nickname')
            nickname = None

        assert Member().linkable.hotlink == '<a href="/members/view"></a>'

    def test_hotlink_to(self, user: User, photo: Photo) -> None:
        html = user.linkable.get_hotlink_to(photo, 'edit', {'ref': 'gallery'})
        assert html == (
            '<a href="/users/photos/edit?id=123&amp;pid=456&amp;ref=gallery">'
            '/users/photos/edit?id=123&amp;pid=456&amp;ref=gallery</a>'
        )

    def test_hotlink_to_requires_behavior(self, user: User) -> None:
        with pytest.raises(InvalidRouteException):
            user.linkable.get_hotlink_to(Plain())


class TestComponentProxy:
    """Behavior members are reachable on the component."""

    def test_property(self, user: User) -> None:
        assert user.url_route == UrlRoute('/users/view', {'id': 123})

    def test_method(self, user: User, photo: Photo) -> None:
        assert user.get_url_route_to(photo).params == {'id': 123, 'pid': 456}

    def test_component_attribute_wins(self, user: User) -> None:
        assert user.name == 'Ann'

    def test_unknown_attribute(self, user: User) -> None:
        with pytest.raises(AttributeError):
            user.missing

    def test_behavior_internals_not_proxied(self, user: User) -> None:
        with pytest.raises(AttributeError):
            user.owner
