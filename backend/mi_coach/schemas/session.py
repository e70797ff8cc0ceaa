"""Pydantic schemas for practice-session allowance.

These schemas define request/response formats for the Session API:
starting a session and checking how many free sessions remain this month.
"""

from enum import Enum

from pydantic import BaseModel, Field


class UserTier(str, Enum):
    """Subscription tiers."""

    FREE = "free"
    PREMIUM = "premium"


class SessionStart(BaseModel):
    """Schema for starting a practice session."""

    user_id: str = Field(min_length=1, max_length=255)
    tier: UserTier = UserTier.FREE


class SessionAllowance(BaseModel):
    """How much practice a user has left in the current month."""

    user_id: str
    tier: UserTier
    sessions_this_month: int
    remaining_free_sessions: int | None = Field(
        default=None,
        description="None for premium users (unlimited)",
    )
    can_start: bool
    session_duration_seconds: int
