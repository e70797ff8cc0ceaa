"""Scenario catalog API routes."""

from fastapi import APIRouter

from mi_coach.services.scenario_catalog import (
    ALL_STAGES,
    DIFFICULTY_STAGES,
    STAGE_DESCRIPTIONS,
    list_topics,
)

router = APIRouter(prefix="/scenarios", tags=["scenarios"])


@router.get("/topics")
async def get_topics() -> dict:
    """List the scenario topics a practice session can be filtered by."""
    return {"items": list_topics()}


@router.get("/stages")
async def get_stages() -> dict:
    """List stages of change, in order, with their descriptions."""
    return {
        "items": [
            {"stage": stage.value, "description": STAGE_DESCRIPTIONS[stage]}
            for stage in ALL_STAGES
        ]
    }


@router.get("/difficulties")
async def get_difficulties() -> dict:
    """Map each difficulty level to the stages it draws from."""
    return {
        difficulty.value: [stage.value for stage in stages]
        for difficulty, stages in DIFFICULTY_STAGES.items()
    }
