"""Locate the router behind a ``module:attribute`` string.

The attribute may be a ``Router``, or an ``Orchestrator`` (instance or
subclass) whose ``initialize()`` builds one. Orchestrators that have
not built their router yet are initialised first.
"""

import importlib

from wren.routing.router import Router
from wren.views.orchestrator import Orchestrator


def resolve_router(target: str) -> Router:
    """Return the router named by *target*.

    ``"myapp.urls"`` is shorthand for ``"myapp.urls:router"``.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` if the name does
    not exist, and ``TypeError`` if it does not lead to a router.
    """
    module_name, _, attribute = target.partition(":")
    found = getattr(importlib.import_module(module_name), attribute or "router")

    match found:
        case Router():
            return found
        case Orchestrator():
            return _router_of(found, target)
        case type() if issubclass(found, Orchestrator):
            return _router_of(found(), target)
        case _:
            msg = f"{target!r} is a {type(found).__name__}, expected a Router or an Orchestrator"
            raise TypeError(msg)


def _router_of(orchestrator: Orchestrator, target: str) -> Router:
    if orchestrator.router is None:
        orchestrator.initialize()
    if orchestrator.router is None:
        msg = f"{target!r}: initialize() did not create a router"
        raise TypeError(msg)
    return orchestrator.router
