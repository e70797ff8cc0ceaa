"""Practice session history API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mi_coach.dependencies import get_session_archive
from mi_coach.schemas import (
    CoachingSummary,
    Session,
    SessionArchive,
    SessionListResponse,
)
from mi_coach.services.history import (
    NoSessionData,
    SessionArchiveStore,
    archive_session,
    generate_coaching_summary,
    list_sessions,
)

router = APIRouter(prefix="/history", tags=["history"])


@router.post("", response_model=Session, status_code=status.HTTP_201_CREATED)
async def create_archived_session(
    body: SessionArchive,
    store: SessionArchiveStore = Depends(get_session_archive),
) -> Session:
    """Archive a finished practice session with its transcript and feedback."""
    return archive_session(store, body)


@router.get("", response_model=SessionListResponse)
async def read_history(
    user_id: str = Query(min_length=1, max_length=255),
    store: SessionArchiveStore = Depends(get_session_archive),
) -> SessionListResponse:
    """List a user's archived sessions, newest first."""
    sessions = list_sessions(store, user_id)
    return SessionListResponse(items=sessions, total=len(sessions))


@router.get("/coaching-summary", response_model=CoachingSummary)
async def read_coaching_summary(
    user_id: str = Query(min_length=1, max_length=255),
    store: SessionArchiveStore = Depends(get_session_archive),
) -> CoachingSummary:
    """Summarise coaching themes across a user's archived sessions.

    Raises:
        HTTPException: 404 if the user has no archived sessions.
    """
    try:
        return generate_coaching_summary(list_sessions(store, user_id))
    except NoSessionData as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
