"""Ordered route table with a single default route.

Routes are registered while the router is being constructed and are
never removed afterwards. Lookup walks the routes in registration order
and returns the first whose pattern matches.
"""

import dataclasses
import logging
from collections.abc import Iterator

from wren.errors import NoDefaultRouteError
from wren.routing.pattern import UrlPattern
from wren.routing.route import Handler, Route

_log = logging.getLogger("wren.router")


class RouteTable:
    """Routes keyed by pattern, plus a separate default reference.

    Usage::

        table = RouteTable()
        table.register("/", home, is_default=True)
        table.register(r"/articles/(\\d+)", article)
        route = table.lookup("/articles/42")
    """

    __slots__ = ("_default", "_logger", "_routes")

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._routes: list[Route] = []
        self._default: Route | None = None
        self._logger = logger or _log

    def register(
        self,
        pattern: str | UrlPattern,
        handler: Handler,
        *,
        is_default: bool = False,
    ) -> Route:
        """Compile *pattern* and bind it to *handler*.

        Re-registering an equal pattern replaces its entry in place.
        Registering a second default replaces the first; the previous
        default stays in the table as a normal route.

        Raises ``MalformedPatternError`` if *pattern* is invalid.
        """
        if not isinstance(pattern, UrlPattern):
            pattern = UrlPattern(pattern)

        previous = self._default
        if previous is not None and previous.pattern == pattern:
            # Re-registering the default pattern keeps it the default.
            is_default = True
        elif is_default and previous is not None:
            self._logger.warning(
                "Only one route can be the default; replacing %s with %s",
                previous.pattern,
                pattern,
            )
            self._store(dataclasses.replace(previous, is_default=False))

        route = Route(pattern=pattern, handler=handler, is_default=is_default)
        if is_default:
            self._default = route
            self._logger.debug("Default route added - %s", pattern)

        self._store(route)
        self._logger.debug("Route added - %s", pattern)
        return route

    def _store(self, route: Route) -> None:
        for index, existing in enumerate(self._routes):
            if existing.pattern == route.pattern:
                self._routes[index] = route
                return
        self._routes.append(route)

    def lookup(self, path: str) -> Route | None:
        """Return the first registered route matching *path*, or None."""
        for route in self._routes:
            if route.pattern.matches(path):
                return route
        return None

    @property
    def default(self) -> Route:
        """The default route.

        Raises ``NoDefaultRouteError`` if none has been registered.
        """
        if self._default is None:
            msg = "No default route registered. Register one route with is_default=True."
            raise NoDefaultRouteError(msg)
        return self._default

    def require_default(self) -> Route:
        """Check that the table is usable and return its default route."""
        return self.default

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __contains__(self, pattern: object) -> bool:
        if isinstance(pattern, str):
            return any(route.pattern.pattern == pattern for route in self._routes)
        return any(route.pattern == pattern for route in self._routes)
