"""Pydantic schemas for archived practice sessions and coaching summaries.

A finished practice session is archived with its patient, transcript and
feedback. The History API lists a user's archive and builds a coaching
summary across it.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mi_coach.schemas.chat import ChatMessage
from mi_coach.schemas.feedback import Feedback
from mi_coach.schemas.patient_profile import PatientProfile
from mi_coach.schemas.session import UserTier


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionArchive(_CamelModel):
    """Request body for archiving a finished practice session."""

    user_id: str = Field(min_length=1, max_length=255)
    patient: PatientProfile
    transcript: list[ChatMessage] = Field(default_factory=list, max_length=1000)
    feedback: Feedback
    tier: UserTier = UserTier.FREE


class Session(_CamelModel):
    """An archived practice session."""

    id: str
    date: datetime
    patient: PatientProfile
    transcript: list[ChatMessage]
    feedback: Feedback
    tier: UserTier


class SessionListResponse(BaseModel):
    """A user's archived sessions, newest first."""

    items: list[Session]
    total: int


class CoachingSummary(_CamelModel):
    """Coaching summary across a user's archived sessions."""

    total_sessions: int = Field(ge=1)
    date_range: str
    strengths_and_trends: str
    areas_for_focus: str
    summary_and_next_steps: str
