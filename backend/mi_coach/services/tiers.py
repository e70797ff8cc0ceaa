"""Tier rules and monthly session allowance.

Free users get a fixed number of practice sessions per calendar month;
premium users are unlimited. Usage counts come from an injected
SessionUsageStore so the rules stay independent of where sessions are kept.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Protocol

from mi_coach.config import settings
from mi_coach.schemas.session import SessionAllowance, UserTier

logger = logging.getLogger(__name__)


class SessionLimitReached(Exception):
    """Raised when a free user has used up this month's sessions."""

    def __init__(self, user_id: str, limit: int):
        self.user_id = user_id
        self.limit = limit
        super().__init__(
            f"User {user_id!r} has used all {limit} free sessions this month"
        )


class SessionUsageStore(Protocol):
    """Persistence interface for session start records."""

    def count_since(self, user_id: str, since: datetime) -> int: ...

    def record(self, user_id: str, started_at: datetime) -> None: ...


class InMemoryUsageStore:
    """Process-local SessionUsageStore.

    Only the current month matters for the allowance, so recording a start
    drops that user's starts from before the new start's month.
    """

    def __init__(self) -> None:
        self._starts: dict[str, list[datetime]] = defaultdict(list)

    def count_since(self, user_id: str, since: datetime) -> int:
        return sum(1 for ts in self._starts.get(user_id, ()) if ts >= since)

    def record(self, user_id: str, started_at: datetime) -> None:
        cutoff = month_start(started_at)
        starts = [ts for ts in self._starts[user_id] if ts >= cutoff]
        starts.append(started_at)
        self._starts[user_id] = starts


def _now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(now: datetime | None) -> datetime:
    """Current time when now is None; naive datetimes are taken as UTC."""
    if now is None:
        return _now()
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def month_start(now: datetime) -> datetime:
    """Midnight on the first day of now's month, keeping now's tzinfo."""
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def session_duration(tier: UserTier) -> int:
    """Practice session length in seconds."""
    if tier == UserTier.PREMIUM:
        return settings.premium_session_duration
    return settings.free_session_duration


def sessions_this_month(
    store: SessionUsageStore, user_id: str, now: datetime | None = None
) -> int:
    return store.count_since(user_id, month_start(as_utc(now)))


def remaining_free_sessions(
    store: SessionUsageStore,
    user_id: str,
    tier: UserTier,
    now: datetime | None = None,
) -> int | None:
    """Sessions left this month, or None for premium (unlimited)."""
    if tier == UserTier.PREMIUM:
        return None
    used = sessions_this_month(store, user_id, now)
    return max(0, settings.free_tier_monthly_limit - used)


def can_start_session(
    store: SessionUsageStore,
    user_id: str,
    tier: UserTier,
    now: datetime | None = None,
) -> bool:
    remaining = remaining_free_sessions(store, user_id, tier, now)
    return remaining is None or remaining > 0


def get_allowance(
    store: SessionUsageStore,
    user_id: str,
    tier: UserTier,
    now: datetime | None = None,
) -> SessionAllowance:
    now = as_utc(now)
    remaining = remaining_free_sessions(store, user_id, tier, now)
    return SessionAllowance(
        user_id=user_id,
        tier=tier,
        sessions_this_month=sessions_this_month(store, user_id, now),
        remaining_free_sessions=remaining,
        can_start=remaining is None or remaining > 0,
        session_duration_seconds=session_duration(tier),
    )


def start_session(
    store: SessionUsageStore,
    user_id: str,
    tier: UserTier,
    now: datetime | None = None,
) -> SessionAllowance:
    """Record a new practice session and return the updated allowance.

    Raises:
        SessionLimitReached: Free user with no sessions left this month.
    """
    now = as_utc(now)
    if not can_start_session(store, user_id, tier, now):
        logger.info(
            "Session limit reached for user %s (limit %d)",
            user_id,
            settings.free_tier_monthly_limit,
        )
        raise SessionLimitReached(user_id, settings.free_tier_monthly_limit)
    store.record(user_id, now)
    return get_allowance(store, user_id, tier, now)
