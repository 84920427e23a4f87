"""Wren — reversible URL routing for single-page apps.

Routes browser-style paths, with or without a ``#`` fragment, to
handlers, and rebuilds canonical paths from handler parameters.

Basic usage::

    from wren import Router

    def home(params): ...
    def article(params): ...

    router = Router(("/", home), [(r"/articles/(\\d+)", article)])
    router.handle_route("/articles/42")   # article(["articles", "42"])
    router.url_for(article, 42)           # "/articles/42"

Attached to a navigation host, the router follows history changes and
internal link activations::

    router = Router(("/", home), routes, host=host)
    router.listen()
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AlreadyListeningError",
    "AppConfig",
    "ArgumentCountError",
    "BindingError",
    "ConfigurationError",
    "EventHost",
    "LifecycleError",
    "LinkActivation",
    "MalformedPatternError",
    "NavigationAdapter",
    "NavigationHost",
    "NoDefaultRouteError",
    "NoMatchError",
    "Route",
    "RouteTable",
    "Router",
    "RouterDisposedError",
    "RouterState",
    "UrlPattern",
    "WrenError",
    "compile_pattern",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("Router", "RouterState"):
        from wren.routing import router as _router

        return getattr(_router, name)

    if name in ("UrlPattern", "compile_pattern"):
        from wren.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name == "Route":
        from wren.routing.route import Route

        return Route

    if name == "RouteTable":
        from wren.routing.table import RouteTable

        return RouteTable

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name in ("NavigationHost", "LinkActivation"):
        from wren.navigation import host as _host

        return getattr(_host, name)

    if name == "NavigationAdapter":
        from wren.navigation.adapter import NavigationAdapter

        return NavigationAdapter

    if name == "EventHost":
        from wren.navigation.events import EventHost

        return EventHost

    if name in (
        "AlreadyListeningError",
        "ArgumentCountError",
        "BindingError",
        "ConfigurationError",
        "LifecycleError",
        "MalformedPatternError",
        "NoDefaultRouteError",
        "NoMatchError",
        "RouterDisposedError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
