"""Tests for the static scenario catalog."""

import dataclasses

import pytest

from mi_coach.schemas import DifficultyLevel, PatientProfileTemplate, StageOfChange
from mi_coach.services.scenario_catalog import (
    ALL_STAGES,
    CANDIDATE_NAMES,
    CANDIDATE_SEXES,
    DIFFICULTY_STAGES,
    PATIENT_PROFILE_TEMPLATES,
    STAGE_DESCRIPTIONS,
    list_topics,
    stages_for_difficulty,
    templates_for_topic,
)


class TestTemplateData:
    """Validate the template table structure and coverage."""

    def test_template_count(self):
        assert len(PATIENT_PROFILE_TEMPLATES) == 22

    def test_topics_unique(self):
        topics = [t.topic for t in PATIENT_PROFILE_TEMPLATES]
        assert len(topics) == len(set(topics))

    @pytest.mark.parametrize("template", PATIENT_PROFILE_TEMPLATES, ids=lambda t: t.topic)
    def test_template_fields(self, template: PatientProfileTemplate):
        low, high = template.age_range
        assert 0 < low <= high
        assert template.presenting_problem
        assert template.history
        assert template.chief_complaint
        assert template.background

    def test_most_backgrounds_carry_age_placeholder(self):
        missing = [t.topic for t in PATIENT_PROFILE_TEMPLATES if "{age}" not in t.background]
        assert missing == ["Compulsive Shopping"]

    def test_conflicting_complaints(self):
        topics = {t.topic for t in PATIENT_PROFILE_TEMPLATES if t.conflicting_chief_complaint}
        assert topics == {
            "Daily Wine Consumption",
            "Compulsive Sports Betting",
            "Sedentary Lifestyle",
            "Medication Non-Adherence (Type 2 Diabetes)",
        }

    def test_templates_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PATIENT_PROFILE_TEMPLATES[0].topic = "Changed"

    def test_inverted_age_range_rejected(self):
        with pytest.raises(ValueError, match="Invalid age range"):
            PatientProfileTemplate(
                topic="Broken",
                presenting_problem="x",
                history="x",
                chief_complaint="x",
                background="x",
                age_range=(40, 30),
            )


class TestCandidates:
    def test_names(self):
        assert len(CANDIDATE_NAMES) == 18

    def test_sexes(self):
        assert CANDIDATE_SEXES == ("Male", "Female", "Non-binary")


class TestStages:
    def test_order(self):
        assert ALL_STAGES == (
            StageOfChange.PRECONTEMPLATION,
            StageOfChange.CONTEMPLATION,
            StageOfChange.PREPARATION,
            StageOfChange.ACTION,
            StageOfChange.MAINTENANCE,
        )

    def test_every_stage_described(self):
        assert set(STAGE_DESCRIPTIONS) == set(StageOfChange)

    def test_difficulty_mapping(self):
        assert DIFFICULTY_STAGES[DifficultyLevel.BEGINNER] == (
            StageOfChange.PREPARATION,
            StageOfChange.ACTION,
            StageOfChange.MAINTENANCE,
        )
        assert DIFFICULTY_STAGES[DifficultyLevel.INTERMEDIATE] == (StageOfChange.CONTEMPLATION,)
        assert DIFFICULTY_STAGES[DifficultyLevel.ADVANCED] == (StageOfChange.PRECONTEMPLATION,)

    def test_stages_for_no_difficulty(self):
        assert stages_for_difficulty(None) == ALL_STAGES


class TestLookups:
    def test_list_topics_in_catalog_order(self):
        topics = list_topics()
        assert topics[0] == "Binge Drinking (Beer)"
        assert topics[-1] == "Psilocybin (Mushroom) Misuse"
        assert len(topics) == len(PATIENT_PROFILE_TEMPLATES)

    def test_templates_for_topic(self):
        matches = templates_for_topic("Cocaine Use")
        assert [t.topic for t in matches] == ["Cocaine Use"]

    def test_templates_for_unknown_topic_is_empty(self):
        assert templates_for_topic("Unknown") == ()

    @pytest.mark.parametrize("topic", [None, ""])
    def test_templates_for_empty_topic_is_everything(self, topic):
        assert templates_for_topic(topic) == PATIENT_PROFILE_TEMPLATES
