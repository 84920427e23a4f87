"""View — renders a model through a kida template into a container.

The container is whatever holds the page content (a DOM element bridge,
a terminal pane, a string buffer in tests). Views only need to append
markup to it and clear it.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from kida import Environment

from wren.views.lifecycle import Disposable, Lifecycle
from wren.views.templates import render_template

_log = logging.getLogger("wren.views")


class Container(Protocol):
    """Where rendered views are placed."""

    def append_html(self, html: str) -> None: ...

    def clear(self) -> None: ...


class View(Disposable):
    """A template bound to a model.

    Subclasses set ``template_name`` and may override ``decorate_model``
    and ``post_render``::

        class ArticleView(View):
            template_name = "article.html"

            def decorate_model(self) -> None:
                self.model["title"] = self.model["title"].upper()
    """

    template_name: str = ""

    def __init__(
        self,
        model: Mapping[str, Any],
        *,
        env: Environment,
        container: Container,
        template_name: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.model: dict[str, Any] = dict(model)
        self.env = env
        self.container = container
        if template_name is not None:
            self.template_name = template_name
        self.child_views: list[View] = []
        self.output: str | None = None
        self.logger = logger or _log
        self.lifecycle = Lifecycle.ACTIVE
        self._loaded_listeners: list[Callable[[str], None]] = []

    def on_view_loaded(self, callback: Callable[[str], None]) -> None:
        """Call *callback* with the rendered markup after each render."""
        self._loaded_listeners.append(callback)

    def decorate_model(self) -> None:
        """Hook: adjust ``self.model`` before rendering."""

    def post_render(self) -> None:
        """Hook: runs after the markup has been placed in the container."""

    def render(self) -> str:
        """Render the template and append it to the container."""
        self._ensure_active()
        self.decorate_model()
        self.output = render_template(self.env, self.template_name, self.model)
        self.container.append_html(self.output)
        self.post_render()
        self.logger.debug("Rendered view %s", self.template_name)
        for callback in list(self._loaded_listeners):
            callback(self.output)
        return self.output

    def add_child(self, view: "View") -> None:
        self._ensure_active()
        self.child_views.append(view)

    def destroy(self) -> None:
        """Destroy child views, clear the container, and dispose."""
        if self.disposed:
            return
        for child in self.child_views:
            child.destroy()
        self.child_views.clear()
        self._loaded_listeners.clear()
        self.container.clear()
        self.output = None
        self.lifecycle = Lifecycle.DISPOSED
