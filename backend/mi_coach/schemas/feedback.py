"""Pydantic schemas for session coaching feedback."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mi_coach.schemas.chat import ChatMessage
from mi_coach.schemas.session import UserTier

AnalysisStatus = Literal["complete", "insufficient-data"]


class Feedback(BaseModel):
    """Coaching feedback for a finished practice session.

    Free tier only receives what_went_right; premium fills in the rest.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    what_went_right: str
    key_takeaway: str | None = None
    empathy_score: int | None = Field(default=None, ge=0, le=10)
    constructive_feedback: str | None = None
    key_skills_used: list[str] | None = None
    next_practice_focus: str | None = None
    analysis_status: AnalysisStatus = "complete"
    analysis_message: str | None = None


class FeedbackRequest(BaseModel):
    """Request body for the feedback endpoint."""

    transcript: list[ChatMessage] = Field(default_factory=list, max_length=1000)
    tier: UserTier = UserTier.FREE
