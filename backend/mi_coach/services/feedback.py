"""Canned coaching feedback for finished practice sessions.

Feedback depth depends on the user's tier: free users get a single
"what went right" summary, premium users get the full breakdown. A transcript
with no clinician input gets an insufficient-data result instead.
"""

import logging

from mi_coach.schemas.chat import ChatMessage
from mi_coach.schemas.feedback import Feedback
from mi_coach.schemas.session import UserTier

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA_SUMMARY = (
    "There's not enough clinician input from this session to generate feedback."
)
INSUFFICIENT_DATA_MESSAGE = (
    "We didn't receive any clinician responses, so there isn't enough "
    "information to interpret this encounter. Try another session when "
    "you're ready to practice."
)

FREE_WHAT_WENT_RIGHT = (
    "You did a wonderful job creating a space where the patient felt safe to "
    "open up. Your open-ended questions encouraged them to share more deeply, "
    "and your reflections showed that you were truly listening. The patient "
    "seemed to feel heard and respected, which is exactly what makes "
    "Motivational Interviewing effective."
)

PREMIUM_FEEDBACK = {
    "key_takeaway": (
        "You created a safe, non-judgmental space for the patient to explore "
        "their ambivalence about change. Your genuine curiosity and validation "
        "helped build rapport, which is the foundation of effective MI."
    ),
    "empathy_score": 7,
    "what_went_right": (
        "Your reflective listening was solid. You consistently fed back what "
        "you heard in a way that helped the patient feel understood. You also "
        "showed genuine interest by asking follow-up questions that built on "
        "what the patient shared, which demonstrates real engagement rather "
        "than just going through a script."
    ),
    "constructive_feedback": (
        "You have an excellent opportunity to deepen your work by using more "
        "complex reflections. For example, when the patient said they were "
        "worried about failure, you could have offered a more nuanced "
        "reflection like 'It sounds like part of you really wants to make this "
        "change, but there's another part that's protecting you from the "
        "disappointment of trying and not succeeding.' This kind of reflection "
        "helps patients feel deeply understood and can strengthen their resolve."
    ),
    "key_skills_used": ["Open Questions", "Reflections", "Affirmations"],
    "next_practice_focus": (
        "For your next session, focus on using at least three complex "
        "reflections that name both sides of the patient's ambivalence. A "
        "complex reflection acknowledges and normalizes the internal conflict "
        "the patient is experiencing, which can actually help move them "
        "toward change."
    ),
}


def has_clinician_input(transcript: list[ChatMessage]) -> bool:
    return any(msg.author == "user" and msg.text.strip() for msg in transcript)


def generate_feedback(transcript: list[ChatMessage], tier: UserTier) -> Feedback:
    """Build feedback for a session transcript.

    Args:
        transcript: Ordered chat messages from the session.
        tier: The user's subscription tier.

    Returns:
        Feedback with fields populated according to tier.
    """
    if not has_clinician_input(transcript):
        logger.warning("No clinician input in transcript, returning insufficient-data")
        return Feedback(
            what_went_right=INSUFFICIENT_DATA_SUMMARY,
            analysis_status="insufficient-data",
            analysis_message=INSUFFICIENT_DATA_MESSAGE,
        )

    if tier == UserTier.PREMIUM:
        return Feedback(**PREMIUM_FEEDBACK)
    return Feedback(what_went_right=FREE_WHAT_WENT_RIGHT)
