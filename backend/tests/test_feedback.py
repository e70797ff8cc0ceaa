"""Tests for tiered session feedback."""

import pytest

from mi_coach.schemas import ChatMessage, UserTier
from mi_coach.services.feedback import (
    FREE_WHAT_WENT_RIGHT,
    INSUFFICIENT_DATA_MESSAGE,
    INSUFFICIENT_DATA_SUMMARY,
    generate_feedback,
    has_clinician_input,
)

TRANSCRIPT = [
    ChatMessage(author="patient", text="I don't know why I'm here."),
    ChatMessage(author="user", text="What brings you in today?"),
    ChatMessage(author="patient", text="My partner made me come."),
]


class TestHasClinicianInput:
    def test_with_input(self):
        assert has_clinician_input(TRANSCRIPT)

    @pytest.mark.parametrize("transcript", [
        [],
        [ChatMessage(author="patient", text="Hello?")],
        [ChatMessage(author="user", text="   "), ChatMessage(author="user")],
    ])
    def test_without_input(self, transcript):
        assert not has_clinician_input(transcript)


class TestGenerateFeedback:
    @pytest.mark.parametrize("tier", list(UserTier))
    def test_insufficient_data(self, tier):
        feedback = generate_feedback([ChatMessage(author="patient", text="Hi")], tier)
        assert feedback.analysis_status == "insufficient-data"
        assert feedback.what_went_right == INSUFFICIENT_DATA_SUMMARY
        assert feedback.analysis_message == INSUFFICIENT_DATA_MESSAGE
        assert feedback.empathy_score is None

    def test_free_tier_summary_only(self):
        feedback = generate_feedback(TRANSCRIPT, UserTier.FREE)
        assert feedback.analysis_status == "complete"
        assert feedback.what_went_right == FREE_WHAT_WENT_RIGHT
        assert feedback.key_takeaway is None
        assert feedback.empathy_score is None
        assert feedback.key_skills_used is None

    def test_premium_tier_full_breakdown(self):
        feedback = generate_feedback(TRANSCRIPT, UserTier.PREMIUM)
        assert feedback.analysis_status == "complete"
        assert feedback.empathy_score == 7
        assert feedback.key_skills_used == ["Open Questions", "Reflections", "Affirmations"]
        assert feedback.key_takeaway
        assert feedback.constructive_feedback
        assert feedback.next_practice_focus

    def test_serializes_camel_case(self):
        data = generate_feedback(TRANSCRIPT, UserTier.PREMIUM).model_dump(by_alias=True)
        assert "whatWentRight" in data
        assert "empathyScore" in data
        assert "analysisStatus" in data
