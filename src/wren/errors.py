"""Wren exception hierarchy.

Shared across the pattern compiler, route table, router, and view
layer so every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when router or view configuration is invalid.

    Typically raised while the router is being constructed.
    """


class MalformedPatternError(ConfigurationError, ValueError):
    """A URL pattern cannot be compiled into a reversible matcher."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Malformed URL pattern {pattern!r}: {reason}")


class NoDefaultRouteError(ConfigurationError):
    """The route table has no route flagged as default."""


class NoMatchError(WrenError, LookupError):
    """A path does not match a URL pattern."""

    def __init__(self, pattern: str, path: str) -> None:
        self.pattern = pattern
        self.path = path
        super().__init__(f"No match for {path!r} against {pattern!r}")


class ArgumentCountError(WrenError, TypeError):
    """``reverse()`` received fewer arguments than the pattern has groups."""


class AlreadyListeningError(WrenError):
    """``Router.listen()`` was called more than once."""


class RouterDisposedError(WrenError):
    """A router was used after ``close()``."""


class LifecycleError(WrenError):
    """A controller or view was used after it was destroyed."""


class BindingError(WrenError):
    """An attribute binding refers to a selector it does not hold."""
