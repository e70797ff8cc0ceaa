"""Patient profile generation for practice sessions.

Picks a coherent scenario from the static catalog and instantiates the
per-session details: age within the template's range, name, sex, stage of
change, and (for some scenarios) a chief complaint that deliberately does not
match the presenting problem.

Generation never fails. A topic that matches nothing falls back to the full
catalog. Pass a seeded ``random.Random`` as ``rng`` for reproducible output.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence, TypeVar

from mi_coach.schemas.patient_profile import (
    PatientProfile,
    PatientProfileFilters,
    PatientProfileTemplate,
    StageOfChange,
)
from mi_coach.services.scenario_catalog import (
    CANDIDATE_NAMES,
    CANDIDATE_SEXES,
    PATIENT_PROFILE_TEMPLATES,
    stages_for_difficulty,
    templates_for_topic,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

AGE_PLACEHOLDER = "{age}"
CONFLICTING_COMPLAINT_PROBABILITY = 0.5


def _choice(rng: random.Random | None, items: Sequence[T]) -> T:
    return (rng or random).choice(items)


def _select_templates(topic: str | None) -> tuple[PatientProfileTemplate, ...]:
    templates = templates_for_topic(topic)
    if not templates:
        logger.warning("No scenario for topic %r, using full catalog", topic)
        return PATIENT_PROFILE_TEMPLATES
    return templates


def _resolve_chief_complaint(
    template: PatientProfileTemplate, rng: random.Random | None
) -> str:
    """Swap in the conflicting complaint on a fair coin flip, when one exists."""
    if template.conflicting_chief_complaint and (
        (rng or random).random() < CONFLICTING_COMPLAINT_PROBABILITY
    ):
        return template.conflicting_chief_complaint
    return template.chief_complaint


def _resolve_stage(
    filters: PatientProfileFilters, rng: random.Random | None
) -> StageOfChange:
    # Explicit stage > difficulty subset > any stage
    if filters.stage_of_change is not None:
        return filters.stage_of_change
    return _choice(rng, stages_for_difficulty(filters.difficulty))


def generate_profile(
    filters: PatientProfileFilters | None = None,
    rng: random.Random | None = None,
) -> PatientProfile:
    """Generate a patient profile for a new practice session.

    Args:
        filters: Optional topic / stage / difficulty constraints.
        rng: Random source. Defaults to the module-level ``random`` state.

    Returns:
        A freshly instantiated PatientProfile.
    """
    filters = filters or PatientProfileFilters()

    template = _choice(rng, _select_templates(filters.topic))
    min_age, max_age = template.age_range
    age = (rng or random).randint(min_age, max_age)

    profile = PatientProfile(
        topic=template.topic,
        presenting_problem=template.presenting_problem,
        history=template.history,
        chief_complaint=_resolve_chief_complaint(template, rng),
        background=template.background.replace(AGE_PLACEHOLDER, str(age)),
        name=_choice(rng, CANDIDATE_NAMES),
        age=age,
        sex=_choice(rng, CANDIDATE_SEXES),
        stage_of_change=_resolve_stage(filters, rng),
    )
    logger.debug(
        "Generated profile topic=%r stage=%s age=%d",
        profile.topic,
        profile.stage_of_change.value,
        profile.age,
    )
    return profile
