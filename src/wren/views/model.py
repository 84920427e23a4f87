"""Model — a flat attribute map with change notification and bindings."""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from wren.views.bindings import AttributeBinding, BindingSpec, resolve_bindings

_log = logging.getLogger("wren.views")

type ChangeListener = Callable[[str, Any], None]


@dataclass(frozen=True, slots=True)
class Deleted:
    """Value passed to change listeners when an attribute is removed."""


DELETED = Deleted()


class Model:
    """Application data for one controller.

    Created from a flat mapping; an empty or missing mapping falls back
    to ``default_values()``. ``bind()`` without explicit bindings binds
    every attribute to the elements whose ``name`` matches it.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._data: dict[str, Any] = dict(data) if data else self.default_values()
        self._listeners: list[ChangeListener] = []
        self._bindings: dict[str, AttributeBinding] = {}
        self.logger = logger or _log

    def default_values(self) -> dict[str, Any]:
        """Hook: data for a model created without any."""
        return {}

    @property
    def data(self) -> dict[str, Any]:
        return dict(self._data)

    @property
    def bindings(self) -> dict[str, AttributeBinding]:
        return dict(self._bindings)

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Set an attribute and notify change listeners if it changed."""
        if name in self._data and self._data[name] == value:
            return
        self._data[name] = value
        self.logger.debug("Model attribute changed - %s", name)
        for listener in list(self._listeners):
            listener(name, value)

    def delete(self, name: str) -> None:
        """Remove an attribute and notify change listeners with ``DELETED``.

        Raises ``KeyError`` if the attribute does not exist.
        """
        del self._data[name]
        self.logger.debug("Model attribute deleted - %s", name)
        for listener in list(self._listeners):
            listener(name, DELETED)

    def on_change(self, listener: ChangeListener) -> Callable[[], None]:
        """Subscribe to attribute changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def bind(
        self,
        bindings: Mapping[str, str | Sequence[str] | BindingSpec] | None = None,
    ) -> dict[str, AttributeBinding]:
        """Replace the current bindings and return the resolved ones."""
        self.unbind()
        if bindings is None:
            bindings = {name: f"[name={name}]" for name in self._data}
        self._bindings = resolve_bindings(bindings)
        return self.bindings

    def unbind(self) -> None:
        self._bindings = {}

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __delitem__(self, name: str) -> None:
        self.delete(name)
