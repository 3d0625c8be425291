"""Shared fixtures: isolate config overrides and the facade container."""

import pytest

from linkable.behaviors import Component, LinkableBehavior
from linkable.support import Config
from linkable.support.facades import Facade


@pytest.fixture(autouse=True)
def _isolate_globals():
    Config.clear_runtime_overrides()
    Facade.set_app(None)
    Facade.clear_current_request()
    yield
    Config.clear_runtime_overrides()
    Facade.set_app(None)
    Facade.clear_current_request()


class User(Component):
    linkable = LinkableBehavior(default_params=lambda user: {'id': user.id})

    def __init__(self, id: int, name: str = 'Ann') -> None:
        self.id = id
        self.name = name


class Photo(Component):
    linkable = LinkableBehavior(default_params=lambda photo: {'id': photo.id})

    def __init__(self, id: int) -> None:
        self.id = id


@pytest.fixture
def user() -> User:
    return User(123)


@pytest.fixture
def photo() -> Photo:
    return Photo(456)
