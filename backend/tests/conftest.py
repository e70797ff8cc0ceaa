"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- HTTP client for API testing (fresh usage store and session archive,
  seeded random source)
- Deterministic patient profiles built straight from catalog templates
"""

import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mi_coach.dependencies import get_rng, get_session_archive, get_usage_store
from mi_coach.main import app
from mi_coach.schemas import PatientProfile, PatientProfileTemplate, StageOfChange
from mi_coach.services.history import InMemorySessionArchive
from mi_coach.services.scenario_catalog import PATIENT_PROFILE_TEMPLATES
from mi_coach.services.tiers import InMemoryUsageStore

TEST_SEED = 1234


def profile_from_template(
    template: PatientProfileTemplate,
    stage: StageOfChange,
    *,
    age: int | None = None,
    conflicting: bool = False,
) -> PatientProfile:
    """Build a profile from a template without any randomness."""
    age = template.age_range[0] if age is None else age
    complaint = (
        template.conflicting_chief_complaint
        if conflicting and template.conflicting_chief_complaint
        else template.chief_complaint
    )
    return PatientProfile(
        name="Alex Johnson",
        age=age,
        sex="Non-binary",
        background=template.background.replace("{age}", str(age)),
        presenting_problem=template.presenting_problem,
        topic=template.topic,
        history=template.history,
        chief_complaint=complaint,
        stage_of_change=stage,
    )


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest.fixture
def usage_store() -> InMemoryUsageStore:
    """Empty session usage store, shared with the client fixture."""
    return InMemoryUsageStore()


@pytest.fixture
def session_archive() -> InMemorySessionArchive:
    """Empty session archive, shared with the client fixture."""
    return InMemorySessionArchive()


@pytest_asyncio.fixture
async def client(usage_store, session_archive):
    """Async test client for the FastAPI app.

    ASGITransport does not run the lifespan, so app-scoped resources are
    supplied through dependency overrides instead.
    """
    rng = random.Random(TEST_SEED)
    app.dependency_overrides[get_usage_store] = lambda: usage_store
    app.dependency_overrides[get_session_archive] = lambda: session_archive
    app.dependency_overrides[get_rng] = lambda: rng

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.pop(get_usage_store, None)
    app.dependency_overrides.pop(get_session_archive, None)
    app.dependency_overrides.pop(get_rng, None)


# =============================================================================
# Profile Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible generation."""
    return random.Random(TEST_SEED)


@pytest.fixture
def beer_template() -> PatientProfileTemplate:
    """Binge drinking scenario (software engineer, no conflicting complaint)."""
    return PATIENT_PROFILE_TEMPLATES[0]


@pytest.fixture
def engineer_patient(beer_template) -> PatientProfile:
    """Precontemplation software engineer, age 28."""
    return profile_from_template(
        beer_template, StageOfChange.PRECONTEMPLATION, age=28
    )


@pytest.fixture
def make_profile():
    """Factory fixture wrapping profile_from_template."""
    return profile_from_template
