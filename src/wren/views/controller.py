"""Controller base class.

A controller is created by a route handler (through the orchestrator),
loads its model, and then renders its view once the model is ready.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from wren.views.lifecycle import Disposable, Lifecycle
from wren.views.view import View

_log = logging.getLogger("wren.views")


class Controller(Disposable, ABC):
    """Base for page controllers.

    Subclasses implement ``init`` (load the model, then call
    ``model_loaded``) and ``load_view``::

        class ArticleController(Controller):
            def init(self, properties, socket=None):
                self.properties = dict(properties)
                self.model_loaded({"id": properties["id"]})

            def load_view(self):
                self.view = ArticleView(self.model, env=env, container=page)
                self.view.render()
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self.view: View | None = None
        self.model: dict[str, Any] | None = None
        self.properties: dict[str, Any] = {}
        self.socket: Any = None
        self.logger = logger or _log
        self.lifecycle = Lifecycle.ACTIVE
        self._model_listeners: list[Callable[[dict[str, Any]], None]] = []

    def on_model_loaded(self, callback: Callable[[dict[str, Any]], None]) -> None:
        self._ensure_active()
        self._model_listeners.append(callback)

    def model_loaded(self, model: Mapping[str, Any]) -> None:
        """Store *model* and notify listeners that it is ready."""
        self._ensure_active()
        self.model = dict(model)
        for callback in list(self._model_listeners):
            callback(self.model)

    @abstractmethod
    def init(self, properties: Mapping[str, Any], socket: Any = None) -> None: ...

    @abstractmethod
    def load_view(self) -> None: ...

    def destroy(self) -> None:
        """Destroy the view and dispose of the controller."""
        if self.disposed:
            return
        if self.view is not None:
            self.view.destroy()
            self.view = None
        self._model_listeners.clear()
        self.lifecycle = Lifecycle.DISPOSED
        self.logger.debug("Destroyed %s", type(self).__name__)
