"""Navigation adapter — reconciles push-state and fragment navigation.

Hosts with push-state history get whole paths pushed into the location
bar; other hosts can only change the fragment without reloading. The
adapter hides that difference from the router: it reads the current
path, writes new locations, and turns host notifications and internal
link activations into router calls.
"""

import logging
from collections.abc import Callable

from wren.navigation.host import LinkActivation, NavigationHost, Unsubscribe

_log = logging.getLogger("wren.navigation")


class NavigationAdapter:
    """Bridges a ``NavigationHost`` and the router.

    Internal links are marked with an attribute, for example::

        <a href="/demographics/view/1234" asc-nav="true" title="Demographics">
    """

    __slots__ = ("_host", "_logger", "_nav_attribute", "_subscriptions", "use_fragment")

    def __init__(
        self,
        host: NavigationHost,
        *,
        use_fragment: bool,
        nav_attribute: str = "asc-nav",
        logger: logging.Logger | None = None,
    ) -> None:
        self._host = host
        self.use_fragment = use_fragment
        self._nav_attribute = nav_attribute
        self._logger = logger or _log
        self._subscriptions: list[Unsubscribe] = []

    @property
    def host(self) -> NavigationHost:
        return self._host

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    def current_path(self) -> str:
        """The path to route for the host's current location."""
        if self.use_fragment:
            return self._host.location_hash().removeprefix("#")
        return self._host.location_path()

    def update_location(self, path: str, title: str | None = None) -> None:
        """Show *path* in the location bar without reloading."""
        self._logger.debug("Update location - %s, %s", path, title)
        title = title or ""
        if self.use_fragment:
            self._host.set_hash(path)
            self._host.set_title(title)
        else:
            self._host.push_state(path, title)

    def attach(
        self,
        on_navigate: Callable[[str], None],
        on_link: Callable[[str, str], None],
    ) -> None:
        """Subscribe to location changes and internal link activations.

        *on_navigate* receives the new path after a history or fragment
        change. *on_link* receives ``(path, title)`` for internal links.
        """

        def location_changed() -> None:
            path = self.current_path()
            self._logger.debug("Location changed - %s", path)
            on_navigate(path)

        def link_activated(link: LinkActivation) -> None:
            self._handle_link(link, on_link)

        if self.use_fragment:
            self._subscriptions.append(self._host.on_hash_change(location_changed))
        else:
            self._subscriptions.append(self._host.on_pop_state(location_changed))
        self._subscriptions.append(self._host.on_link(link_activated))

    def detach(self) -> None:
        """Remove every subscription made by ``attach()``."""
        while self._subscriptions:
            self._subscriptions.pop()()

    def is_internal_nav(self, link: LinkActivation) -> bool:
        """True if *link* targets this host and carries the nav attribute."""
        internal = link.host == self._host.location_host()
        return internal and link.attributes.get(self._nav_attribute) == "true"

    def _handle_link(
        self,
        link: LinkActivation,
        on_link: Callable[[str, str], None],
    ) -> None:
        if self.is_internal_nav(link):
            link.prevent_default()
            self._logger.debug("Link activated - %s%s", link.pathname, link.hash)
            on_link(f"{link.pathname}{link.hash}", link.title)
        elif link.host == self._host.location_host():
            self._logger.debug(
                "Internal link not handled by router: %s%s", link.host, link.pathname
            )
        else:
            self._logger.debug("External link: %s%s", link.host, link.pathname)
