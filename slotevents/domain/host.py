"""Host environment primitives: object lifetime, liveness and delivery."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class DeliveryError(RuntimeError):
    """Raised when a callback cannot be invoked on a handler."""


class HostObject:
    """An entity whose lifetime is controlled by the host.

    Destroyed objects stay reachable from Python but no longer pass
    ``Host.is_valid``.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__
        self._destroyed = False

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self, notify: bool = True) -> None:
        """Destroy the object, running ``on_destroy`` first when *notify* is set."""
        if self._destroyed:
            return
        if notify:
            self.on_destroy()
        self._destroyed = True
        logger.debug("Destroyed %s", self.name)

    def on_destroy(self) -> None:
        pass

    def __repr__(self) -> str:
        state = " destroyed" if self._destroyed else ""
        return f"<{type(self).__name__} {self.name!r}{state}>"


class Host:
    """Liveness check and callback delivery used by emitters."""

    def is_valid(self, ref: Any) -> bool:
        if ref is None:
            return False
        return not getattr(ref, "destroyed", False)

    def deliver(self, handler: Any, name: str) -> None:
        callback = getattr(handler, name, None)
        if callback is None or not callable(callback):
            raise DeliveryError(
                f"{getattr(handler, 'name', handler)!s} has no callable {name!r}"
            )
        callback()


default_host = Host()
