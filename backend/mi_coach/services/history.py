"""Practice session archive and cross-session coaching summary.

Finished sessions are archived per user through an injected
SessionArchiveStore. The coaching summary aggregates a user's archive into
strengths, focus areas and next steps. Without a live language model the
summary text is canned; only the session count and date range vary.
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from datetime import datetime
from typing import Protocol, Sequence

from mi_coach.schemas.history import CoachingSummary, Session, SessionArchive
from mi_coach.services.tiers import as_utc

logger = logging.getLogger(__name__)

DATE_FORMAT = "%m/%d/%Y"


class NoSessionData(Exception):
    """Raised when a coaching summary is requested for an empty archive."""

    def __init__(self) -> None:
        super().__init__("No session data available to generate a summary.")


class SessionArchiveStore(Protocol):
    """Persistence interface for archived sessions."""

    def add(self, user_id: str, session: Session) -> None: ...

    def list_for_user(self, user_id: str) -> list[Session]: ...


class InMemorySessionArchive:
    """Process-local SessionArchiveStore. Unbounded; lost on restart."""

    def __init__(self) -> None:
        self._sessions: dict[str, list[Session]] = defaultdict(list)

    def add(self, user_id: str, session: Session) -> None:
        self._sessions[user_id].append(session)

    def list_for_user(self, user_id: str) -> list[Session]:
        return list(self._sessions.get(user_id, ()))


def archive_session(
    store: SessionArchiveStore,
    request: SessionArchive,
    now: datetime | None = None,
) -> Session:
    """Archive a finished session and return the stored record."""
    session = Session(
        id=str(uuid.uuid4()),
        date=as_utc(now),
        patient=request.patient,
        transcript=request.transcript,
        feedback=request.feedback,
        tier=request.tier,
    )
    store.add(request.user_id, session)
    logger.info(
        "Archived session %s for user %s (topic=%r)",
        session.id,
        request.user_id,
        session.patient.topic,
    )
    return session


def list_sessions(store: SessionArchiveStore, user_id: str) -> list[Session]:
    """A user's archived sessions, newest first."""
    return sorted(store.list_for_user(user_id), key=lambda s: s.date, reverse=True)


def _plural(count: int) -> str:
    return "session" if count == 1 else "sessions"


def generate_coaching_summary(sessions: Sequence[Session]) -> CoachingSummary:
    """Summarise coaching themes across archived sessions.

    Args:
        sessions: Archived sessions in any order.

    Returns:
        CoachingSummary whose date range runs from the earliest to the
        latest session (MM/DD/YYYY).

    Raises:
        NoSessionData: sessions is empty.
    """
    if not sessions:
        raise NoSessionData()

    ordered = sorted(sessions, key=lambda s: s.date)
    count = len(ordered)
    sessions_word = _plural(count)
    date_range = (
        f"{ordered[0].date.strftime(DATE_FORMAT)} to "
        f"{ordered[-1].date.strftime(DATE_FORMAT)}"
    )
    these = "this session" if count == 1 else "these sessions"

    return CoachingSummary(
        total_sessions=count,
        date_range=date_range,
        strengths_and_trends="\n".join(
            [
                f"* Across your {count} practice {sessions_word}, you've demonstrated "
                "consistent engagement and real commitment to developing your MI skills",
                "* Your reflective listening skills are a clear strength: you're regularly "
                "validating patient experiences and helping them feel heard across "
                "multiple sessions",
                "* You're showing strong adaptability by working with different patient "
                "profiles and stages of change, which is crucial for real-world practice",
                f"* Your empathy scores have remained stable across {these}, indicating "
                "you maintain a genuine, non-judgmental stance across conversations",
                "* You're successfully creating safe spaces where patients feel "
                "comfortable opening up about their concerns",
            ]
        ),
        areas_for_focus=(
            f"A recurring theme across your {count} {sessions_word} is the opportunity "
            "to use more complex reflections that name both sides of patient "
            "ambivalence, moving beyond simple reflections to ones that deepen "
            "understanding and build discrepancy. Focusing on this will help you "
            "explore patients' ambivalence and motivations more effectively, which is "
            "crucial for facilitating movement through the stages of change."
        ),
        summary_and_next_steps=(
            "You're demonstrating real growth in your Motivational Interviewing "
            f"practice! Based on the analysis of your {count} {sessions_word}, your "
            "consistent engagement and genuine curiosity are creating meaningful "
            "connections with patients. The next level of your development is to "
            "deepen your reflections and become more intentional about using specific "
            "MI skills to help patients move toward behavior change. For your next "
            "practice session, pick one specific skill to focus on (complex "
            "reflections, exploring ambivalence, or eliciting change talk) and "
            "practice it with intention. Quality over quantity will accelerate your "
            "growth."
        ),
    )
