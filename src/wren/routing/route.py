"""Route frozen dataclass and the handler type."""

from collections.abc import Callable
from dataclasses import dataclass

from wren.routing.pattern import UrlPattern

# A handler receives the ordered path parameters; its result is not inspected
# beyond handing an awaitable off to the navigation host.
type Handler = Callable[[list[str]], object]


@dataclass(frozen=True, slots=True)
class Route:
    """A URL pattern bound to one handler.

    Created during router construction. A default route is also a
    normal, matchable route.
    """

    pattern: UrlPattern
    handler: Handler
    is_default: bool = False

    @property
    def name(self) -> str:
        """Handler name, for logging and route listings."""
        return getattr(self.handler, "__name__", repr(self.handler))
