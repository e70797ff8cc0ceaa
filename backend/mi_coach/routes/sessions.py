"""Practice session allowance API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mi_coach.dependencies import get_usage_store
from mi_coach.schemas import SessionAllowance, SessionStart, UserTier
from mi_coach.services.tiers import (
    SessionLimitReached,
    SessionUsageStore,
    get_allowance,
    start_session,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/allowance", response_model=SessionAllowance)
async def read_allowance(
    user_id: str = Query(min_length=1, max_length=255),
    tier: UserTier = UserTier.FREE,
    store: SessionUsageStore = Depends(get_usage_store),
) -> SessionAllowance:
    """Report this month's usage and whether a new session may start."""
    return get_allowance(store, user_id, tier)


@router.post("", response_model=SessionAllowance, status_code=status.HTTP_201_CREATED)
async def create_session(
    body: SessionStart,
    store: SessionUsageStore = Depends(get_usage_store),
) -> SessionAllowance:
    """Start a practice session, counting it against the monthly allowance.

    Raises:
        HTTPException: 403 if a free user has no sessions left this month.
    """
    try:
        return start_session(store, body.user_id, body.tier)
    except SessionLimitReached as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exc),
        ) from exc
