"""In-process navigation host driven by an anyio memory object stream.

``EventHost`` stands in for a browser: it keeps a location, a title
and a history, and delivers pop-state, hash-change and link events to
subscribers. Like a browser, setting the hash fires a hash change while
``push_state()`` fires nothing.

Events are queued on an anyio stream and delivered one at a time, each
to completion, so dispatch stays single-threaded and cooperative. Async
handler results handed to ``spawn()`` run in the host's task group and
are never awaited by the router.

Usage::

    host = EventHost(path="/")
    router = Router(("/", home), [(r"/articles/(\\d+)", article)], host=host)
    router.listen()
    host.click(LinkActivation(host="localhost", pathname="/articles/7",
                              attributes={"asc-nav": "true"}))
    await host.run_until_idle()
"""

import logging
import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum

import anyio
from anyio.abc import TaskGroup

from wren.navigation.host import LinkActivation, Unsubscribe

_log = logging.getLogger("wren.navigation")


class EventKind(StrEnum):
    POP_STATE = "popstate"
    HASH_CHANGE = "hashchange"
    LINK = "link"


@dataclass(frozen=True, slots=True)
class HostEvent:
    """A queued host notification."""

    kind: EventKind
    link: LinkActivation | None = None


async def _run(awaitable: Awaitable[object]) -> None:
    await awaitable


class EventHost:
    """A ``NavigationHost`` that lives entirely in-process."""

    def __init__(
        self,
        *,
        host: str = "localhost",
        path: str = "/",
        hash: str = "",
        title: str = "",
        supports_push_state: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._host = host
        self._path = path
        self._hash = hash
        self._title = title
        self._supports_push_state = supports_push_state
        self._logger = logger or _log

        self._history: list[tuple[str, str]] = [(path, hash)]
        self._listeners: dict[EventKind, list[Callable[..., None]]] = {
            kind: [] for kind in EventKind
        }
        self._send, self._receive = anyio.create_memory_object_stream[HostEvent](
            max_buffer_size=math.inf
        )
        self._task_group: TaskGroup | None = None
        self._pending: list[Awaitable[object]] = []
        self._closed = False
        self.followed_links: list[LinkActivation] = []

    # -- NavigationHost -------------------------------------------------------

    @property
    def supports_push_state(self) -> bool:
        return self._supports_push_state

    def location_host(self) -> str:
        return self._host

    def location_path(self) -> str:
        return self._path

    def location_hash(self) -> str:
        return self._hash

    @property
    def title(self) -> str:
        return self._title

    @property
    def history(self) -> list[str]:
        """Every location visited, oldest first, as ``path + hash``."""
        return [f"{path}{hash_}" for path, hash_ in self._history]

    def push_state(self, path: str, title: str) -> None:
        self._path, _, fragment = path.partition("#")
        self._hash = f"#{fragment}" if fragment else ""
        self._title = title
        self._history.append((self._path, self._hash))

    def set_hash(self, path: str) -> None:
        new_hash = path if path.startswith("#") else f"#{path}"
        if new_hash == self._hash:
            return
        self._hash = new_hash
        self._history.append((self._path, self._hash))
        self._emit(HostEvent(EventKind.HASH_CHANGE))

    def set_title(self, title: str) -> None:
        self._title = title

    def on_pop_state(self, callback: Callable[[], None]) -> Unsubscribe:
        return self._subscribe(EventKind.POP_STATE, callback)

    def on_hash_change(self, callback: Callable[[], None]) -> Unsubscribe:
        return self._subscribe(EventKind.HASH_CHANGE, callback)

    def on_link(self, callback: Callable[[LinkActivation], None]) -> Unsubscribe:
        return self._subscribe(EventKind.LINK, callback)

    def spawn(self, awaitable: Awaitable[object]) -> None:
        if self._task_group is None:
            # Started as soon as the host runs.
            self._pending.append(awaitable)
        else:
            self._task_group.start_soon(_run, awaitable)

    # -- Simulated user actions ----------------------------------------------

    def go(self, url: str) -> None:
        """Traverse to *url* (``path`` plus optional ``#fragment``)."""
        path, _, fragment = url.partition("#")
        new_hash = f"#{fragment}" if fragment else ""
        hash_only = path == self._path and new_hash != self._hash
        self._path, self._hash = path, new_hash
        self._history.append((path, new_hash))
        self._emit(HostEvent(EventKind.POP_STATE))
        if hash_only:
            self._emit(HostEvent(EventKind.HASH_CHANGE))

    def back(self) -> None:
        """Return to the previous history entry."""
        if len(self._history) < 2:
            return
        self._history.pop()
        old_hash = self._hash
        self._path, self._hash = self._history[-1]
        self._emit(HostEvent(EventKind.POP_STATE))
        if old_hash != self._hash:
            self._emit(HostEvent(EventKind.HASH_CHANGE))

    def click(self, link: LinkActivation) -> None:
        """Activate *link* as if the user clicked it."""
        self._emit(HostEvent(EventKind.LINK, link))

    # -- Event loop -----------------------------------------------------------

    async def run_until_idle(self) -> None:
        """Deliver queued events and wait for spawned handler work.

        Handlers may navigate after an ``await``, queueing more events,
        so rounds repeat until the queue is empty and nothing is pending.
        """
        while True:
            async with anyio.create_task_group() as tg:
                self._start(tg)
                while True:
                    try:
                        event = self._receive.receive_nowait()
                    except (anyio.WouldBlock, anyio.EndOfStream):
                        break
                    self._deliver(event)
                    await anyio.sleep(0)
            self._task_group = None
            if not self._pending and not self._queued():
                return

    def _queued(self) -> int:
        return self._receive.statistics().current_buffer_used

    async def serve(self) -> None:
        """Deliver events until ``close()`` is called."""
        async with anyio.create_task_group() as tg:
            self._start(tg)
            async with self._receive:
                async for event in self._receive:
                    self._deliver(event)
        self._task_group = None

    def close(self) -> None:
        """Stop accepting events. ``serve()`` returns once the queue drains."""
        self._closed = True
        self._send.close()

    def _start(self, tg: TaskGroup) -> None:
        self._task_group = tg
        pending, self._pending = self._pending, []
        for awaitable in pending:
            tg.start_soon(_run, awaitable)

    def _emit(self, event: HostEvent) -> None:
        if self._closed:
            self._logger.debug("Host closed, dropping %s event", event.kind)
            return
        self._send.send_nowait(event)

    def _subscribe(self, kind: EventKind, callback: Callable[..., None]) -> Unsubscribe:
        listeners = self._listeners[kind]
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def _deliver(self, event: HostEvent) -> None:
        self._logger.debug("Delivering %s event", event.kind)
        for callback in list(self._listeners[event.kind]):
            if event.link is None:
                callback()
            else:
                callback(event.link)
        if event.link is not None and not event.link.default_prevented:
            self.followed_links.append(event.link)
