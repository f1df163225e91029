"""Sample handler counting how often its event fired."""

from __future__ import annotations

import logging
import uuid

from slotevents.domain.host import HostObject, default_host
from slotevents.samples.example_emitter import ExampleEventEmitter

logger = logging.getLogger(__name__)

_SLOTS = {
    1: ExampleEventEmitter.EVENT_ONE,
    2: ExampleEventEmitter.EVENT_TWO,
}


class ExampleEventReceiver(HostObject):
    """Subscribes to event one or two of an ``ExampleEventEmitter``.

    ``_on_event`` is the callback name handed to the emitter; it only needs
    to be reachable through ``getattr``.
    """

    def __init__(
        self,
        emitter: ExampleEventEmitter | None,
        event_index: int = 1,
        name: str | None = None,
    ) -> None:
        super().__init__(name)
        self.id = str(uuid.uuid4())
        self.emitter = emitter
        self.event_index = event_index
        self.enabled = True
        self.event_count = 0
        self.text = "0"

    def start(self) -> None:
        if not default_host.is_valid(self.emitter):
            logger.error("[ExampleEventReceiver] Invalid emitter reference - Disabled")
            self.enabled = False
            return

        slot = _SLOTS.get(self.event_index)
        if slot is None:
            logger.error("[ExampleEventReceiver] Invalid event index - Disabled")
            self.enabled = False
            return

        self.emitter.register(slot, self, "_on_event")

    def on_destroy(self) -> None:
        slot = _SLOTS.get(self.event_index)
        if slot is None or not default_host.is_valid(self.emitter):
            return
        self.emitter.unregister(slot, self, "_on_event")

    def _on_event(self) -> None:
        self.event_count += 1
        self.text = str(self.event_count)
