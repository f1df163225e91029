"""Pydantic models describing emitter and receiver state."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class SampleEvent(StrEnum):
    ONE = "one"
    TWO = "two"


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------


class RegistrationView(BaseModel):
    handler: str | None
    callback_name: str
    valid: bool


class SlotSnapshot(BaseModel):
    slot: int
    registrations: list[RegistrationView] = Field(default_factory=list)


class EmitterSnapshot(BaseModel):
    name: str
    event_count: int
    is_updating_handlers: bool = False
    slots: list[SlotSnapshot] = Field(default_factory=list)


class ReceiverState(BaseModel):
    id: str
    name: str
    event_index: int
    event_count: int = 0
    text: str = "0"
    enabled: bool = True
    destroyed: bool = False


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


class CreateReceiverRequest(BaseModel):
    event_index: int = Field(ge=1, le=2)
    name: str | None = None
