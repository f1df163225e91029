"""FastAPI application driving the sample emitter and receivers."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from slotevents.config import Settings
from slotevents.domain.host import default_host
from slotevents.domain.models import (
    CreateReceiverRequest,
    EmitterSnapshot,
    ReceiverState,
    RegistrationView,
    SampleEvent,
    SlotSnapshot,
)
from slotevents.logger import configure_logger
from slotevents.repos.memory import ReceiverRepository
from slotevents.samples.example_emitter import ExampleEventEmitter
from slotevents.samples.example_receiver import ExampleEventReceiver

logger = logging.getLogger(__name__)

settings = Settings.from_env()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    log_file = configure_logger(
        log_level=settings.log_level_value,
        log_dir=settings.log_dir,
        max_log_files=settings.max_log_files,
    )
    if log_file is not None:
        logger.info("Logging to %s", log_file)
    yield


app = FastAPI(title=settings.title, lifespan=lifespan)

# ── Singletons (created at import time for simplicity) ────────────────
emitter = ExampleEventEmitter(name="example-emitter")
receiver_repo = ReceiverRepository()


def _receiver_state(receiver: ExampleEventReceiver) -> ReceiverState:
    return ReceiverState(
        id=receiver.id,
        name=receiver.name,
        event_index=receiver.event_index,
        event_count=receiver.event_count,
        text=receiver.text,
        enabled=receiver.enabled,
        destroyed=receiver.destroyed,
    )


def _get_receiver(receiver_id: str) -> ExampleEventReceiver:
    receiver = receiver_repo.get(receiver_id)
    if receiver is None:
        raise HTTPException(status_code=404, detail="Receiver not found")
    return receiver


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/emitter", response_model=EmitterSnapshot)
def get_emitter() -> EmitterSnapshot:
    """Return the emitter's registrations, slot by slot."""
    slots = []
    for slot in range(emitter.event_count):
        registrations = [
            RegistrationView(
                handler=getattr(handler, "name", None),
                callback_name=callback_name,
                valid=default_host.is_valid(handler),
            )
            for handler, callback_name in emitter.registrations(slot)
        ]
        slots.append(SlotSnapshot(slot=slot, registrations=registrations))

    return EmitterSnapshot(
        name=emitter.name,
        event_count=emitter.event_count,
        is_updating_handlers=emitter.is_updating_handlers,
        slots=slots,
    )


@app.post("/emitter/events/{event}/trigger", response_model=list[ReceiverState])
def trigger_event(event: SampleEvent) -> list[ReceiverState]:
    """Emit event one or two and return every receiver afterwards."""
    if event == SampleEvent.ONE:
        emitter.trigger_event_one()
    else:
        emitter.trigger_event_two()
    return [_receiver_state(r) for r in receiver_repo.list_all()]


@app.post("/receivers", response_model=ReceiverState)
def create_receiver(body: CreateReceiverRequest) -> ReceiverState:
    """Create a receiver and subscribe it to the requested event."""
    receiver = ExampleEventReceiver(emitter, event_index=body.event_index, name=body.name)
    receiver.start()
    receiver_repo.add(receiver)
    return _receiver_state(receiver)


@app.get("/receivers", response_model=list[ReceiverState])
def list_receivers() -> list[ReceiverState]:
    return [_receiver_state(r) for r in receiver_repo.list_all()]


@app.get("/receivers/{receiver_id}", response_model=ReceiverState)
def get_receiver(receiver_id: str) -> ReceiverState:
    return _receiver_state(_get_receiver(receiver_id))


@app.post("/receivers/{receiver_id}/destroy", response_model=ReceiverState)
def destroy_receiver(receiver_id: str, cleanup: bool = True) -> ReceiverState:
    """Destroy a receiver.

    With ``cleanup=false`` the receiver skips unregistering, leaving a stale
    entry that the emitter skips and later sweeps.
    """
    receiver = _get_receiver(receiver_id)
    if receiver.destroyed:
        raise HTTPException(status_code=400, detail="Receiver is already destroyed")
    receiver.destroy(notify=cleanup)
    return _receiver_state(receiver)
