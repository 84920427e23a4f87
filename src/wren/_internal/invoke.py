"""Invoke helpers — call sync or async route handlers uniformly.

Wren handlers can be ``def`` or ``async def``. The router never waits
for a handler: an awaitable result is handed to a spawner (normally the
navigation host) and dispatch returns immediately. This module keeps
that check in exactly one place.

Usage::

    from wren._internal.invoke import invoke_detached

    invoke_detached(route.handler, params, spawn=host.spawn)
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from wren.errors import ConfigurationError


def invoke_detached(
    handler: Callable[..., Any],
    *args: Any,
    spawn: Callable[[Awaitable[Any]], None] | None = None,
) -> None:
    """Call a handler; schedule its result if it is awaitable.

    Works with both sync and async callables::

        # sync: runs to completion inside dispatch
        def article(params):
            show_article(params[1])

        # async: started by the host, not awaited by the router
        async def article(params):
            data = await fetch_article(params[1])
            show_article(data)

    Raises ``ConfigurationError`` if an async handler is used without a
    spawner to run it.
    """
    result = handler(*args)
    if inspect.isawaitable(result):
        if spawn is None:
            if inspect.iscoroutine(result):
                result.close()
            name = getattr(handler, "__name__", repr(handler))
            msg = f"Async handler {name!r} needs a navigation host to run it."
            raise ConfigurationError(msg)
        spawn(result)
