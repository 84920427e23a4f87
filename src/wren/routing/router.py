"""Router — matches paths to handlers and keeps the location canonical.

The router owns a ``RouteTable`` and, optionally, a ``NavigationAdapter``
around a host. It moves through three states::

    CONFIGURED --listen()--> LISTENING
         \\                      |
          +------close()--------+--> DISPOSED

A router without a host stays CONFIGURED and is driven entirely by
``handle_route()``/``handle_link()`` calls.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from enum import StrEnum

from wren._internal.invoke import invoke_detached
from wren.config import AppConfig
from wren.errors import (
    AlreadyListeningError,
    ConfigurationError,
    NoDefaultRouteError,
    RouterDisposedError,
)
from wren.navigation.adapter import NavigationAdapter
from wren.navigation.host import NavigationHost
from wren.routing.pattern import UrlPattern
from wren.routing.route import Handler, Route
from wren.routing.table import RouteTable

_log = logging.getLogger("wren.router")

# A route given as ``(pattern, handler)`` or as a ``Route``.
type RouteSpec = Route | tuple[str | UrlPattern, Handler]


class RouterState(StrEnum):
    CONFIGURED = "configured"
    LISTENING = "listening"
    DISPOSED = "disposed"


def extract_parameters(path: str) -> list[str]:
    """Split a canonical path into handler parameters.

    The first ``/`` is dropped and the rest is split on ``/``::

        "/page1/view/78654" -> ["page1", "view", "78654"]
    """
    return path.replace("/", "", 1).split("/")


class Router:
    """Routes paths to handlers and reverses handlers back to paths.

    Usage::

        router = Router(
            ("/home", home),
            [(r"/articles/(\\d+)", article), (r"/app#profile/(\\d+)", profile)],
            host=host,
        )
        router.listen()

    Handlers receive the canonical path split into segments, so
    ``/articles/42`` calls ``article(["articles", "42"])``.
    """

    __slots__ = ("_logger", "_navigation", "_state", "_table", "_use_fragment")

    def __init__(
        self,
        default: RouteSpec | None,
        routes: Iterable[RouteSpec] = (),
        *,
        host: NavigationHost | None = None,
        config: AppConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        config = config or AppConfig()
        self._logger = logger or _log
        self._table = RouteTable(logger=self._logger)
        self._state = RouterState.CONFIGURED

        if default is None:
            msg = "Router requires a default route."
            raise NoDefaultRouteError(msg)
        pattern, handler = _unpack(default)
        self._table.register(pattern, handler, is_default=True)
        for spec in routes:
            pattern, handler = _unpack(spec)
            self._table.register(pattern, handler, is_default=_is_default(spec))
        self._table.require_default()

        if config.use_fragment is not None:
            self._use_fragment = config.use_fragment
        else:
            self._use_fragment = host is not None and not host.supports_push_state

        self._navigation: NavigationAdapter | None = None
        if host is not None:
            self._navigation = NavigationAdapter(
                host,
                use_fragment=self._use_fragment,
                nav_attribute=config.nav_attribute,
                logger=self._logger,
            )

        self._logger.info("Router initialized - use_fragment=%s", self._use_fragment)

        # A page loaded at a deep link dispatches without waiting for an event.
        if self._navigation is not None:
            self.handle_route(self._navigation.current_path())

    # -- Accessors --

    @property
    def state(self) -> RouterState:
        return self._state

    @property
    def is_listening(self) -> bool:
        return self._state is RouterState.LISTENING

    @property
    def use_fragment(self) -> bool:
        return self._use_fragment

    @property
    def routes(self) -> list[Route]:
        return self._table.routes

    @property
    def default_route(self) -> Route:
        return self._table.default

    @property
    def navigation(self) -> NavigationAdapter | None:
        return self._navigation

    # -- Lifecycle --

    def listen(self) -> None:
        """Start routing host history changes and internal link activations.

        Fragment hosts notify through hash changes, push-state hosts
        through pop-state. May only be called once.
        """
        self._ensure_active()
        if self._state is RouterState.LISTENING:
            msg = "listen() may only be called once."
            raise AlreadyListeningError(msg)
        if self._navigation is None:
            msg = "listen() needs a navigation host."
            raise ConfigurationError(msg)

        self._navigation.attach(self.handle_route, self.handle_link)
        self._state = RouterState.LISTENING
        self._logger.debug("Router is listening")

    def close(self) -> None:
        """Detach from the host. The router cannot be used afterwards."""
        if self._state is RouterState.DISPOSED:
            return
        if self._navigation is not None:
            self._navigation.detach()
        self._state = RouterState.DISPOSED
        self._logger.debug("Router closed")

    # -- Dispatch --

    def handle_route(self, path: str | None) -> None:
        """Dispatch a path that arrived from the host's location.

        The location is only rewritten when nothing matches and the
        default route runs instead.
        """
        self._ensure_active()
        path = path or ""
        route = self._table.lookup(path)
        if route is None:
            self._fall_back(path)
            return
        self._execute(route, path)

    def handle_link(self, path: str | None, title: str | None = None) -> None:
        """Dispatch an internal link activation.

        The location is updated before the handler runs. A listening
        fragment-mode router leaves dispatch to the hash change that the
        update triggers, so the handler runs once.
        """
        self._ensure_active()
        path = path or ""
        route = self._table.lookup(path)
        self._logger.debug("Handle link - %s : %s", path, title)
        if route is None:
            self._fall_back(path)
            return

        deferred = self._hash_change_pending(path)
        self._update_location(path, title)
        if not deferred:
            self._execute(route, path)

    def navigate(self, path: str, title: str | None = None) -> None:
        """Navigate programmatically, exactly like an internal link."""
        self.handle_link(path, title)

    def url_for(self, target: Handler | str | UrlPattern, *args: object) -> str:
        """Build the canonical path for a registered route.

        *target* is a handler or a pattern. Uses the router's fragment
        mode when writing the ``#`` marker.
        """
        self._ensure_active()
        raw = str(target) if isinstance(target, (str, UrlPattern)) else None
        for route in self._table:
            if route.handler is target or raw == route.pattern.pattern:
                return route.pattern.reverse(args, use_fragment=self._use_fragment)
        msg = f"No route registered for {target!r}"
        raise LookupError(msg)

    def _fall_back(self, path: str) -> None:
        default = self._table.default
        self._logger.warning("No route found for %r - executing default route", path)
        default_path = self._default_path(default)
        deferred = self._hash_change_pending(default_path)
        self._update_location(default_path, None)
        if not deferred:
            invoke_detached(default.handler, [], spawn=self._spawner())

    def _hash_change_pending(self, path: str) -> bool:
        """True if writing *path* fires a hash change this router dispatches."""
        if not (self.is_listening and self._use_fragment and self._navigation is not None):
            return False
        return self._navigation.current_path() != path

    def _default_path(self, default: Route) -> str:
        pattern = default.pattern
        if pattern.capture_count:
            return pattern.pattern
        return pattern.reverse((), use_fragment=self._use_fragment)

    def _execute(self, route: Route, path: str) -> None:
        pieces = route.pattern.parse(path)
        fixed_path = route.pattern.reverse(pieces, use_fragment=self._use_fragment)
        self._logger.debug("Executing route - %s", route.pattern)
        invoke_detached(route.handler, extract_parameters(fixed_path), spawn=self._spawner())

    def _update_location(self, path: str, title: str | None) -> None:
        if self._navigation is not None:
            self._navigation.update_location(path, title)

    def _spawner(self) -> Callable[[Awaitable[object]], None] | None:
        return self._navigation.host.spawn if self._navigation is not None else None

    def _ensure_active(self) -> None:
        if self._state is RouterState.DISPOSED:
            msg = "Router has been closed."
            raise RouterDisposedError(msg)


def _unpack(spec: RouteSpec) -> tuple[str | UrlPattern, Handler]:
    if isinstance(spec, Route):
        return spec.pattern, spec.handler
    pattern, handler = spec
    return pattern, handler


def _is_default(spec: RouteSpec) -> bool:
    return isinstance(spec, Route) and spec.is_default