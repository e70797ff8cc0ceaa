"""FastAPI dependencies for app-scoped resources.

The random source, the session usage store and the session archive are
created at startup and kept on ``app.state``; tests override these
dependencies directly.
"""

import random

from fastapi import Request

from mi_coach.services.history import SessionArchiveStore
from mi_coach.services.mock_responder import MockPatientResponder
from mi_coach.services.tiers import SessionUsageStore


def get_rng(request: Request) -> random.Random | None:
    return getattr(request.app.state, "rng", None)


def get_usage_store(request: Request) -> SessionUsageStore:
    return request.app.state.usage_store


def get_session_archive(request: Request) -> SessionArchiveStore:
    return request.app.state.session_archive


def get_responder() -> MockPatientResponder:
    return MockPatientResponder()
