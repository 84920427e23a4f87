"""Shared fixtures: a synchronous navigation host and recording handlers."""

from collections.abc import Awaitable, Callable

import pytest

from wren.navigation.host import LinkActivation, Unsubscribe


class FakeHost:
    """Synchronous ``NavigationHost`` that records every location write.

    Notifications fire only when a test calls ``pop_state()``,
    ``hash_change()`` or ``click()``, so dispatch order is explicit.
    """

    def __init__(
        self,
        *,
        path: str = "/",
        hash: str = "",
        host: str = "localhost",
        supports_push_state: bool = True,
    ) -> None:
        self.path = path
        self.hash = hash
        self.host = host
        self.title = ""
        self.supports_push_state = supports_push_state
        self.pushed: list[tuple[str, str]] = []
        self.hashes: list[str] = []
        self.spawned: list[Awaitable[object]] = []
        self._listeners: dict[str, list[Callable[..., None]]] = {
            "popstate": [],
            "hashchange": [],
            "link": [],
        }

    def location_host(self) -> str:
        return self.host

    def location_path(self) -> str:
        return self.path

    def location_hash(self) -> str:
        return self.hash

    def push_state(self, path: str, title: str) -> None:
        self.pushed.append((path, title))
        self.path = path
        self.title = title

    def set_hash(self, path: str) -> None:
        self.hashes.append(path)
        self.hash = f"#{path}"

    def set_title(self, title: str) -> None:
        self.title = title

    def on_pop_state(self, callback: Callable[[], None]) -> Unsubscribe:
        return self._subscribe("popstate", callback)

    def on_hash_change(self, callback: Callable[[], None]) -> Unsubscribe:
        return self._subscribe("hashchange", callback)

    def on_link(self, callback: Callable[[LinkActivation], None]) -> Unsubscribe:
        return self._subscribe("link", callback)

    def spawn(self, awaitable: Awaitable[object]) -> None:
        self.spawned.append(awaitable)

    def listener_count(self, kind: str) -> int:
        return len(self._listeners[kind])

    # -- test drivers --

    def pop_state(self, path: str) -> None:
        self.path = path
        for callback in list(self._listeners["popstate"]):
            callback()

    def hash_change(self, hash_: str) -> None:
        self.hash = hash_
        for callback in list(self._listeners["hashchange"]):
            callback()

    def click(self, link: LinkActivation) -> None:
        for callback in list(self._listeners["link"]):
            callback(link)

    def _subscribe(self, kind: str, callback: Callable[..., None]) -> Unsubscribe:
        listeners = self._listeners[kind]
        listeners.append(callback)
        return lambda: listeners.remove(callback)


class Recorder:
    """A handler that records each parameter list it is called with."""

    def __init__(self, name: str = "handler") -> None:
        self.__name__ = name
        self.calls: list[list[str]] = []

    def __call__(self, params: list[str]) -> None:
        self.calls.append(params)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def hash_host() -> FakeHost:
    return FakeHost(hash="#/", supports_push_state=False)
