"""In-memory repository for sample receivers."""

from __future__ import annotations

from slotevents.samples.example_receiver import ExampleEventReceiver


class ReceiverRepository:
    """Dict-backed store for ExampleEventReceiver instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, ExampleEventReceiver] = {}

    def add(self, receiver: ExampleEventReceiver) -> None:
        self._store[receiver.id] = receiver

    def get(self, receiver_id: str) -> ExampleEventReceiver | None:
        return self._store.get(receiver_id)

    def list_all(self) -> list[ExampleEventReceiver]:
        return list(self._store.values())
