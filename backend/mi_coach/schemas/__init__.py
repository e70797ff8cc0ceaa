"""Pydantic schemas."""

from mi_coach.schemas.chat import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ClinicianIntent,
)
from mi_coach.schemas.feedback import Feedback, FeedbackRequest
from mi_coach.schemas.history import (
    CoachingSummary,
    Session,
    SessionArchive,
    SessionListResponse,
)
from mi_coach.schemas.patient_profile import (
    DifficultyLevel,
    PatientProfile,
    PatientProfileFilters,
    PatientProfileTemplate,
    StageOfChange,
)
from mi_coach.schemas.session import SessionAllowance, SessionStart, UserTier

__all__ = [
    # Chat schemas
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ClinicianIntent",
    # Feedback schemas
    "Feedback",
    "FeedbackRequest",
    # History schemas
    "CoachingSummary",
    "Session",
    "SessionArchive",
    "SessionListResponse",
    # Patient profile schemas
    "DifficultyLevel",
    "PatientProfile",
    "PatientProfileFilters",
    "PatientProfileTemplate",
    "StageOfChange",
    # Session schemas
    "SessionAllowance",
    "SessionStart",
    "UserTier",
]
