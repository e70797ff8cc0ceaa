"""Pydantic schemas for the practice chat API."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from mi_coach.schemas.patient_profile import PatientProfile

MAX_MESSAGE_LENGTH = 10000


class ClinicianIntent(str, Enum):
    """Coarse classification of what a clinician utterance is asking for."""

    EMOTION = "emotion"
    INFO = "info"
    PLAN = "plan"
    BARRIER = "barrier"
    REFLECT = "reflect"


class ChatMessage(BaseModel):
    """A single transcript entry."""

    author: Literal["user", "patient"] = Field(
        description="'user' is the clinician, 'patient' the simulated patient"
    )
    text: str = Field(default="", max_length=MAX_MESSAGE_LENGTH)


class ChatRequest(BaseModel):
    """Request body for the chat endpoint."""

    message: str = Field(
        min_length=1,
        max_length=MAX_MESSAGE_LENGTH,
        description="The clinician's latest utterance",
    )
    patient: PatientProfile | None = Field(
        default=None,
        description="Active patient profile. Omitted gives a generic reply.",
    )


class ChatResponse(BaseModel):
    """Simulated patient reply."""

    reply: str
    intent: ClinicianIntent
    source: Literal["mock"] = "mock"
