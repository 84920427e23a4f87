"""Explicit lifecycle tag for controllers and views."""

from enum import StrEnum

from wren.errors import LifecycleError


class Lifecycle(StrEnum):
    ACTIVE = "active"
    DISPOSED = "disposed"


class Disposable:
    """Mixin that fails fast when an object is used after ``dispose``."""

    __slots__ = ()

    lifecycle: Lifecycle

    @property
    def disposed(self) -> bool:
        return self.lifecycle is Lifecycle.DISPOSED

    def _ensure_active(self) -> None:
        if self.lifecycle is Lifecycle.DISPOSED:
            msg = f"{type(self).__name__} has been destroyed."
            raise LifecycleError(msg)
