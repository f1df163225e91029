"""Per-object event emitter with a fixed set of integer event slots."""

from __future__ import annotations

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any

from slotevents.domain import array_ops
from slotevents.domain.host import Host, HostObject, default_host

logger = logging.getLogger(__name__)

_PREFIX = "[Event Emitter]"


class AbstractEventEmitter(HostObject, ABC):
    """Base class for objects which broadcast a fixed set of events.

    Handlers register a ``(slot, handler, callback_name)`` entry and get
    ``callback_name`` invoked (without arguments) each time the slot is
    emitted. Handlers are held weakly; entries whose handler was destroyed
    are skipped during a broadcast and purged by the next sweep.

    Registration changes are rejected while a broadcast is in progress.
    """

    def __init__(self, name: str | None = None, host: Host | None = None) -> None:
        super().__init__(name)
        self._host = host or default_host
        self._handlers_initialized = False
        self._handlers: list[tuple[weakref.ref, ...]] = []
        self._callback_names: list[tuple[str, ...]] = []
        self._event_stack_index = 0

    @property
    @abstractmethod
    def event_count(self) -> int:
        """Total number of event slots exposed by this emitter."""

    @property
    def event_stack_index(self) -> int:
        """Depth of broadcasts currently running on this emitter (0 when idle)."""
        return self._event_stack_index

    @property
    def is_updating_handlers(self) -> bool:
        return self._event_stack_index > 0

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def _initialize_handlers(self) -> None:
        if self._handlers_initialized:
            return

        self._handlers = [() for _ in range(self.event_count)]
        self._callback_names = [() for _ in range(self.event_count)]
        self._handlers_initialized = True

    def _is_slot(self, slot: Any) -> bool:
        return (
            isinstance(slot, int)
            and not isinstance(slot, bool)
            and 0 <= slot < self.event_count
        )

    def _is_live(self, ref: weakref.ref) -> bool:
        return self._host.is_valid(ref())

    def _cleanup_handlers(self) -> None:
        """Drop every entry whose handler is gone, keeping the rest in order."""
        if not self._handlers_initialized:
            return

        for slot in range(self.event_count):
            handlers = self._handlers[slot]
            names = self._callback_names[slot]

            kept = [i for i, ref in enumerate(handlers) if self._is_live(ref)]
            if len(kept) == len(handlers):
                continue

            logger.debug(
                "%s Purged %d stale handler(s) from event slot %d on %s",
                _PREFIX,
                len(handlers) - len(kept),
                slot,
                self.name,
            )
            self._handlers[slot] = tuple(handlers[i] for i in kept)
            self._callback_names[slot] = tuple(names[i] for i in kept)

    def register(self, slot: int, handler: Any, callback_name: str) -> None:
        """Subscribe *handler* to *slot*; ``callback_name`` is invoked on emit."""
        self._initialize_handlers()

        if not self._host.is_valid(handler):
            logger.error(
                "%s Attempted to register invalid handler with event slot %s",
                _PREFIX,
                slot,
            )
            return

        handler_name = getattr(handler, "name", repr(handler))
        if not self._is_slot(slot):
            logger.error(
                "%s Attempted to register invalid event slot %s with handler %s#%s",
                _PREFIX,
                slot,
                handler_name,
                callback_name,
            )
            return

        if not callback_name:
            logger.error(
                "%s Attempted to register invalid handler for event slot %d"
                " with handler %s",
                _PREFIX,
                slot,
                handler_name,
            )
            return

        if self.is_updating_handlers:
            logger.error(
                "%s Attempted to register handler %s#%s for event slot %d"
                " while event handler update is in progress",
                _PREFIX,
                handler_name,
                callback_name,
                slot,
            )
            return

        try:
            ref = weakref.ref(handler)
        except TypeError:
            logger.error(
                "%s Handler %s#%s cannot be weakly referenced",
                _PREFIX,
                handler_name,
                callback_name,
            )
            return

        self._cleanup_handlers()

        self._handlers[slot] = array_ops.append(self._handlers[slot], ref)
        self._callback_names[slot] = array_ops.append(
            self._callback_names[slot], callback_name
        )

    def unregister(self, slot: int, handler: Any, callback_name: str) -> None:
        """Remove the first entry of *slot* matching both *handler* and *callback_name*."""
        if not self._handlers_initialized:
            return

        if not self._host.is_valid(handler):
            logger.error(
                "%s Attempted to unregister invalid handler with event slot %s",
                _PREFIX,
                slot,
            )
            return

        handler_name = getattr(handler, "name", repr(handler))
        if not self._is_slot(slot):
            logger.error(
                "%s Attempted to unregister invalid event slot %s with handler %s#%s",
                _PREFIX,
                slot,
                handler_name,
                callback_name,
            )
            return

        if not callback_name:
            logger.error(
                "%s Attempted to unregister invalid handler for event slot %d"
                " with handler %s",
                _PREFIX,
                slot,
                handler_name,
            )
            return

        if self.is_updating_handlers:
            logger.error(
                "%s Attempted to unregister handler %s#%s for event slot %d"
                " while event handler update is in progress",
                _PREFIX,
                handler_name,
                callback_name,
                slot,
            )
            return

        self._cleanup_handlers()

        handlers = self._handlers[slot]
        names = self._callback_names[slot]

        # several entries may share the name; the handler must be the same object
        location = array_ops.find(names, callback_name)
        while location != array_ops.NOT_FOUND and handlers[location]() is not handler:
            location = array_ops.find(names, callback_name, location + 1)

        if location == array_ops.NOT_FOUND:
            return

        self._handlers[slot] = array_ops.remove_at(handlers, location)
        self._callback_names[slot] = array_ops.remove_at(names, location)

    def unregister_all(self, handler: Any) -> None:
        """Remove *handler* from every slot.

        Liveness is not checked so that already destroyed handlers can still
        be cleaned up.
        """
        if handler is None:
            logger.error(
                "%s Attempted to unregister invalid handler from all event slots", _PREFIX
            )
            return

        if not self._handlers_initialized:
            return

        if self.is_updating_handlers:
            logger.error(
                "%s Attempted to unregister handler %s from all event slots"
                " while event handler update is in progress",
                _PREFIX,
                getattr(handler, "name", repr(handler)),
            )
            return

        for slot in range(self.event_count):
            handlers = self._handlers[slot]
            names = self._callback_names[slot]

            kept = [i for i, ref in enumerate(handlers) if ref() is not handler]
            if len(kept) == len(handlers):
                continue

            self._handlers[slot] = tuple(handlers[i] for i in kept)
            self._callback_names[slot] = tuple(names[i] for i in kept)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def handler_count(self, slot: int) -> int:
        if not self._handlers_initialized or not self._is_slot(slot):
            return 0
        return len(self._handlers[slot])

    def registrations(self, slot: int) -> list[tuple[Any, str]]:
        """Return ``(handler, callback_name)`` pairs of *slot* in registration order.

        Collected handlers show up as ``None``.
        """
        if not self._handlers_initialized or not self._is_slot(slot):
            return []
        return [
            (ref(), name)
            for ref, name in zip(self._handlers[slot], self._callback_names[slot])
        ]

    # ------------------------------------------------------------------
    # Broadcast
    # ------------------------------------------------------------------

    def _emit_event(self, slot: int) -> None:
        """Invoke every handler registered for *slot* in registration order."""
        if not self._handlers_initialized:
            return

        if not self._is_slot(slot):
            logger.error("%s Attempted to emit event with invalid id %s", _PREFIX, slot)
            return

        self._event_stack_index += 1
        try:
            handlers = self._handlers[slot]
            names = self._callback_names[slot]

            for ref, callback_name in zip(handlers, names):
                handler = ref()
                if not self._host.is_valid(handler):
                    logger.warning(
                        "%s Stale reference to event handler %s#%s for event %d - Skipped",
                        _PREFIX,
                        getattr(handler, "name", "<collected>"),
                        callback_name,
                        slot,
                    )
                    continue

                self._host.deliver(handler, callback_name)
        finally:
            self._event_stack_index -= 1
