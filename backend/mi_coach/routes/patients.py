"""Patient profile API routes."""

import random

from fastapi import APIRouter, Body, Depends

from mi_coach.dependencies import get_rng
from mi_coach.schemas import PatientProfile, PatientProfileFilters
from mi_coach.services.patient_generator import generate_profile

router = APIRouter(prefix="/patients", tags=["patients"])


@router.post("/generate", response_model=PatientProfile)
async def generate_patient(
    filters: PatientProfileFilters | None = Body(default=None),
    rng: random.Random | None = Depends(get_rng),
) -> PatientProfile:
    """Generate a simulated patient for a new practice session.

    Args:
        filters: Optional topic, stage of change and difficulty. An unknown
            topic falls back to the full scenario catalog.

    Returns:
        The generated patient profile (camelCase fields).
    """
    return generate_profile(filters, rng=rng)
