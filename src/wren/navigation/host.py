"""Navigation host protocol and link activation event.

A host is whatever owns the visible location: a browser bridge, an
embedded webview, or the in-process ``EventHost``. The router only
needs the shape below. The framework checks the shape, not the lineage.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

# Returned by every subscription; calling it removes the listener.
type Unsubscribe = Callable[[], None]


@dataclass(slots=True)
class LinkActivation:
    """An in-page link was activated.

    ``pathname`` and ``hash`` mirror the anchor's URL parts; ``hash``
    includes its leading ``#`` when present.
    """

    host: str
    pathname: str
    hash: str = ""
    title: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Stop the host from following the link itself."""
        self.default_prevented = True


class NavigationHost(Protocol):
    """What the router needs from the environment that owns the location."""

    @property
    def supports_push_state(self) -> bool:
        """True if the host can change the path without reloading."""
        ...

    def location_host(self) -> str: ...

    def location_path(self) -> str: ...

    def location_hash(self) -> str:
        """The current fragment, including its leading ``#`` (or ``""``)."""
        ...

    def push_state(self, path: str, title: str) -> None: ...

    def set_hash(self, path: str) -> None: ...

    def set_title(self, title: str) -> None: ...

    def on_pop_state(self, callback: Callable[[], None]) -> Unsubscribe: ...

    def on_hash_change(self, callback: Callable[[], None]) -> Unsubscribe: ...

    def on_link(self, callback: Callable[[LinkActivation], None]) -> Unsubscribe: ...

    def spawn(self, awaitable: Awaitable[object]) -> None:
        """Run an async handler result without waiting for it."""
        ...
