"""Clinician intent classification and patient-reply post-processing.

Intent classification is a fixed-priority rule list: each rule is a
(pattern, intent) pair evaluated in order, first match wins. There is no
scoring and no I/O.

Post-processing keeps simulated patient replies in the first person and makes
sure the first sentence responds to what the clinician asked for.
"""

from __future__ import annotations

import logging
import re

from mi_coach.schemas.chat import ClinicianIntent
from mi_coach.schemas.patient_profile import PatientProfile

logger = logging.getLogger(__name__)


# ── Intent rules ─────────────────────────────────────────────────────────────

_INTENT_RULES: tuple[tuple[re.Pattern[str], ClinicianIntent], ...] = (
    (
        re.compile(r"feel|feeling|emotion|how.*you.*doing|how.*you.*feel"),
        ClinicianIntent.EMOTION,
    ),
    (
        re.compile(r"plan|next step|goal|what.*will.*you.*do|how.*start"),
        ClinicianIntent.PLAN,
    ),
    (
        re.compile(r"worried|concern|block|barrier|what.*gets.*in.*the.*way"),
        ClinicianIntent.BARRIER,
    ),
    (re.compile(r"^(?:what|how|when|where|why)\b"), ClinicianIntent.INFO),
)


def classify_intent(utterance: str | None) -> ClinicianIntent:
    """Classify a clinician utterance. Falls back to REFLECT."""
    text = (utterance or "").strip().lower()
    for pattern, intent in _INTENT_RULES:
        if pattern.search(text):
            return intent
    return ClinicianIntent.REFLECT


# ── Occupation extraction ────────────────────────────────────────────────────

_JOB_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\w+ engineer",
        r"\w+ teacher",
        r"construction worker",
        r"nurse",
        r"doctor",
        r"lawyer",
        r"manager",
        r"student",
        r"retired",
    )
)


def extract_job(background: str | None) -> str:
    """Pull an occupation token out of a background narrative, or ''."""
    if not background:
        return ""
    for pattern in _JOB_PATTERNS:
        match = pattern.search(background)
        if match:
            return match.group(0)
    return ""


# ── Third person -> first person ─────────────────────────────────────────────

# Order matters: the specific "they report feeling" forms must run before the
# generic "they report" catch-all, and the "patient <verb>" forms before the
# bare "the patient" rule.
_PATIENT = r"\b(?:(?:the|this)\s+)?patient\s+"

_FIRST_PERSON_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in (
        (r'\bthey\s+report\s+feeling\s+"([^"]+)"', r'I feel "\1"'),
        (r"\bthey\s+report\s+feeling\s+([^.]+)", r"I feel \1"),
        (r"\bthey\s+can\s+see\b", "I can see"),
        (r"\bthey\s+(?:are|is)\b", "I am"),
        (r"\bthey\s+(?:has|have)\b", "I have"),
        (r"\btheir\s+", "my "),
        (_PATIENT + r"is\s+here\b", "I'm here"),
        (_PATIENT + r"reports?\b", "I report"),
        (_PATIENT + r"feels?\b", "I feel"),
        (_PATIENT + r"(?:is|are)\b", "I am"),
        (_PATIENT + r"(?:has|have)\b", "I have"),
        (r"\b(?:(?:the|this)\s+)?patient's\b", "my"),
        (r"\b(?:the|this)\s+patients?\b", "I"),
        (r"\bthey\s+report", "I report"),
    )
)


def to_first_person(text: str) -> str:
    """Rewrite profile-style third-person phrasing into the patient's voice."""
    fixed = text
    for pattern, replacement in _FIRST_PERSON_REWRITES:
        fixed = pattern.sub(replacement, fixed)
    if fixed != text:
        logger.debug(
            "Rewrote third-person reply %r -> %r", text[:100], fixed[:100]
        )
    return fixed


# ── Answer-first check ───────────────────────────────────────────────────────

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")

# First-sentence cues that the reply already addresses the intent.
# REFLECT has no cue: any reply is an acceptable response to a reflection.
_ANSWER_CUES: dict[ClinicianIntent, re.Pattern[str]] = {
    ClinicianIntent.EMOTION: re.compile(
        r"i feel|i'm feeling|i am feeling|honestly|to be honest|it feels"
        r"|i've been feeling|i'm|i am"
    ),
    ClinicianIntent.PLAN: re.compile(
        r"i could|i can|i will|my next step|i'm going to|i'll|i might"
    ),
    ClinicianIntent.INFO: re.compile(
        r"\b(?:it is|it's|i think|i guess|well|yeah|so|i|my|the|a|an)\b"
    ),
    ClinicianIntent.BARRIER: re.compile(
        r"the hard part|what makes it hard|my barrier|what gets in the way"
        r"|it's tough|difficult|challenging|struggle"
    ),
}


def _preface(intent: ClinicianIntent, patient: PatientProfile | None) -> str:
    job = (extract_job(patient.background) if patient else "") or "person"
    mood = "worn down" if patient and patient.age >= 40 else "caught in the middle"
    prefaces = {
        ClinicianIntent.EMOTION: (
            f"Honestly, I feel {mood}, and as a {job}, it hits me most after work."
        ),
        ClinicianIntent.PLAN: (
            "I think a realistic next step is to start small, "
            "something I can actually do this week."
        ),
        ClinicianIntent.INFO: "Well, ",
        ClinicianIntent.BARRIER: (
            f"What makes it hard is the routine, especially with my {job} schedule."
        ),
        ClinicianIntent.REFLECT: "What you're saying makes sense, and it lands for me.",
    }
    return prefaces[intent]


def first_sentence(text: str) -> str:
    return _SENTENCE_END.split(text, maxsplit=1)[0]


def ensure_answers_question_first(
    text: str,
    intent: ClinicianIntent,
    patient: PatientProfile | None = None,
) -> str:
    """Keep the reply in first person and lead with an on-intent sentence.

    Args:
        text: Candidate patient reply.
        intent: Classified intent of the clinician's last utterance.
        patient: Active profile, used to personalise the preface.

    Returns:
        The rewritten reply, prefixed with the intent's preface if its first
        sentence does not already answer the intent. Blank input comes back
        stripped and otherwise untouched.
    """
    stripped = (text or "").strip()
    if not stripped:
        return stripped

    processed = to_first_person(stripped)
    lower_first = first_sentence(processed).lower()

    cue = _ANSWER_CUES.get(intent)
    if cue is None or cue.search(lower_first):
        return processed

    preface = _preface(intent, patient)
    if lower_first.startswith(preface.lower().strip()[:10]):
        return processed
    if preface.endswith(" "):
        return f"{preface}{processed}"
    return f"{preface} {processed}"
