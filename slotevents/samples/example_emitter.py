"""Sample emitter exposing two events."""

from __future__ import annotations

from slotevents.domain.emitter import AbstractEventEmitter


class ExampleEventEmitter(AbstractEventEmitter):
    EVENT_ONE = 0
    EVENT_TWO = 1
    EVENT_COUNT = 2

    @property
    def event_count(self) -> int:
        return self.EVENT_COUNT

    def trigger_event_one(self) -> None:
        self._emit_event(self.EVENT_ONE)

    def trigger_event_two(self) -> None:
        self._emit_event(self.EVENT_TWO)
