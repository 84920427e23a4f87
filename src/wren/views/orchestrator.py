"""Orchestrator — swaps controllers as the router dispatches.

Route handlers hand the orchestrator a fresh controller; the
orchestrator reaps the current one, wires model loading to view
loading, and initialises the new one. Parameters arrive in the order
they appear in the URL, so the pattern ``/page1/([a-zA-Z]+)/([0-9]+)``
gives ``["page1", "view", "78654"]`` for ``/page1/view/78654``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from wren.routing.router import Router
from wren.views.controller import Controller

_log = logging.getLogger("wren.views")


class Orchestrator(ABC):
    """Owns the current controller.

    Subclasses build their ``Router`` in ``initialize``; each route
    handler calls ``marshal_controller``::

        class App(Orchestrator):
            def initialize(self):
                self.router = Router(("/", self.home), host=host)
                self.router.listen()

            def home(self, params):
                self.marshal_controller("home", HomeController(), {})
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self.current_controller: Controller | None = None
        self.current_identifier: str | None = None
        self.router: Router | None = None
        self.logger = logger or _log

    @abstractmethod
    def initialize(self) -> None:
        """Create ``self.router`` with a default route and the app's routes."""

    def reap_view(self) -> None:
        """Destroy the current controller, if any, and forget it."""
        if self.current_controller is not None:
            self.logger.debug("Reaping controller %s", self.current_identifier)
            self.current_controller.destroy()
            self.current_controller = None
            self.current_identifier = None

    def marshal_controller(
        self,
        identifier: str,
        controller: Controller,
        properties: Mapping[str, Any] | None = None,
        socket: Any = None,
    ) -> Controller:
        """Make *controller* current and initialise it.

        The previous controller is reaped first. The new controller's
        view is loaded as soon as its model is.
        """
        self.reap_view()
        self.current_controller = controller
        self.current_identifier = identifier
        controller.on_model_loaded(lambda _model: controller.load_view())
        self.logger.debug("Marshalling controller %s", identifier)
        controller.init(dict(properties or {}), socket)
        return controller

    @staticmethod
    def remove_controller_identifier(controller_id: str, parameters: list[str] | None) -> list[str]:
        """Drop the first occurrence of *controller_id* from *parameters*.

        The identifier must be spelled as it appears in the URL.
        """
        remaining = list(parameters or [])
        if controller_id in remaining:
            remaining.remove(controller_id)
        return remaining
