"""Deterministic mock patient responder.

Used when no live language model is configured. A reply is picked from a
stage-specific bank by hashing the clinician's utterance (sum of character
codes), so the same utterance always gets the same reply for the same
patient. Bank entries weave in the patient's job, age, presenting problem and
chief complaint, then go through the first-person / answer-first
post-processing in ``text_processor``.

Never raises and never returns an empty string.
"""

from __future__ import annotations

import logging
from typing import Callable

from mi_coach.schemas.chat import ClinicianIntent
from mi_coach.schemas.patient_profile import PatientProfile, StageOfChange
from mi_coach.services.text_processor import (
    classify_intent,
    ensure_answers_question_first,
    extract_job,
)

logger = logging.getLogger(__name__)

# Replies used when no patient context is available.
GENERIC_RESPONSES: tuple[str, ...] = (
    "You know, I've never really thought about it that way before. I guess when you put it like that, it does sound pretty serious. I mean, I know things aren't perfect, but I always figured it would just... work itself out somehow. But now that you mention it, I'm not sure if that's realistic.",
    "That's a fair point. I appreciate you asking that instead of just telling me what to do. Most people just tell me I need to change, but they don't really listen to what I'm going through. It's different when someone actually wants to understand my side of things.",
    "I want to say yes, but honestly, I'm scared. Like, I know what I'm doing isn't working, but at least I know how it works. If I try something different and it doesn't work, then what? I don't know... I'm just worried I'll fail again, and that would be even worse.",
    "Yeah, I've thought about that. It's just complicated, you know? On one hand, I can see how it would help. But on the other hand, there are so many obstacles. My job is crazy right now, my family's not supportive, and I just don't know if I have the energy to deal with this change on top of everything else.",
    "I guess I never looked at it that way. I always blamed it on bad luck or other people, but maybe... maybe I have more control over this than I thought. It's kind of uncomfortable to think about it like that, because it means I'm responsible. But at the same time, if I'm responsible, then I could also fix it.",
    "Um... I don't know. I'm not really sure where to start. Part of me wants to make a change, but part of me is terrified. Like, what if I try and fail? What if people think less of me? Or worse, what if I succeed but then I can't keep it up? I just don't know if I'm strong enough for this.",
    "I've been dealing with this for a while now, and honestly, it's exhausting. Some days I feel like I'm making progress, and other days I feel like I'm back to square one. But I'm trying, you know? I'm really trying. I just wish it was easier or that I had more support.",
    "Thanks for listening, really. Not many people ask me about this without judgment. It's nice to talk to someone who isn't going to lecture me or make me feel worse about myself. I already feel bad enough as it is.",
    "I'll think about what you've said. It's actually been really helpful talking this through. Sometimes I get so caught up in my own head that I can't see things clearly. But hearing myself say it out loud, and having you reflect it back to me... it's making me wonder if maybe I could actually do this.",
    "I'm doing my best, even when it feels like I'm not making progress. Some days are harder than others, and I know I'm not perfect, but I'm here and I'm trying. That has to count for something, right? I just need to figure out how to keep this momentum going.",
    "I don't know, honestly. I feel like I'm stuck between wanting things to be different and being afraid that I can't actually make it happen. It's like I want to change, but I don't want to do the work. Does that make sense? I know it sounds lazy or something, but it's more complicated than that.",
    "Look, I hear what you're saying, and I'm not trying to be defensive. It's just... this is hard for me to talk about. I don't usually open up like this, so it's making me uncomfortable. But I can tell you genuinely care, and that makes it easier. I'm just trying to figure out if I'm ready to actually do something about this.",
)


def utterance_hash(utterance: str) -> int:
    """Sum of character codes. Stable across processes, unlike hash()."""
    return sum(ord(ch) for ch in utterance)


# ── Stage banks ──────────────────────────────────────────────────────────────
#
# Each builder returns the five candidate replies for one stage given
# (job, age, problem, complaint). problem is the lower-cased presenting
# problem minus its final period; complaint is the first sentence of the
# chief complaint.


def _precontemplation(job: str, age: int, problem: str, complaint: str) -> list[str]:
    return [
        f"Look, I'm a {job}. {problem} is just part of how things work in my world. I don't see why everyone's making such a big deal about it."
        if job
        else f"I don't really see {problem} as a problem. It's just how things are.",
        f"I'm {age} years old. I've been dealing with this for years and I'm fine. People need to stop worrying about me."
        if age >= 40
        else f"I'm {age}. I know what I'm doing. {problem} isn't really affecting me.",
        f"I don't get why {complaint.lower()}. Everyone deals with this. It's not like I'm the only one.",
        f"In my line of work as a {job}, this is normal. Everyone I know does this. My partner's just overreacting."
        if job
        else "This is just how I've always been. I don't see why it's suddenly a problem now.",
        f"I've managed fine so far. {problem} hasn't stopped me from doing what I need to do.",
    ]


def _contemplation(job: str, age: int, problem: str, complaint: str) -> list[str]:
    return [
        f"I'm {age}, and I've been doing this for a while. I know {problem} is an issue, but I'm not sure I can change at this point in my life."
        if age >= 40
        else f"I know there's a problem with {problem}, but I'm {age} and I'm scared about what changing would mean.",
        f"Yeah, I see the issue. Working as a {job}, the stress is real. But I don't know if I can handle changing this on top of everything else."
        if job
        else f"I know {problem} is affecting me, but part of me thinks maybe it's not that bad? I'm torn.",
        f"I've thought about it. {complaint}, but I'm worried about failing. What if I try and it doesn't work?",
        f"I'm {age}, I've got responsibilities. I know I need to address {problem}, but I'm scared about what it would take."
        if age >= 35
        else f"Part of me wants to change, but part of me is terrified. I'm {age}, and I don't know if I'm strong enough for this.",
        f"I hear what you're saying about {problem}. I guess I've been thinking about it more lately. But I'm not sure I'm ready.",
    ]


def _preparation(job: str, age: int, problem: str, complaint: str) -> list[str]:
    return [
        f"I've decided I need to do something about {problem}. Working as a {job}, I know I need to make changes, but I'm not sure where to start."
        if job
        else f"I want to change. I've tried before with {problem}, but it didn't stick. I need to figure out what I did wrong.",
        f"I'm {age}, and I've been dealing with this long enough. I'm ready to try something different. Can you help me figure out how to make it work this time?"
        if age >= 30
        else f"I'm {age} and I know I need to address this. I've thought about it, and I think I'm ready to take the next step.",
        f"I've been thinking about what you said. {problem} has been affecting my life, and I want to do something about it. I just need help figuring out how.",
        f"I'm ready to make a change. I know {problem} isn't working for me anymore. I've tried before, but maybe this time will be different if I have a plan.",
        f"I want to do this. I really do. But I'm scared. {complaint}, and I don't want to fail again. What can I do differently?",
    ]


def _action(job: str, age: int, problem: str, complaint: str) -> list[str]:
    return [
        f"I've been working on it. As a {job}, it's been challenging, but I'm making progress. Some days are harder than others, especially after work."
        if job
        else f"I'm doing it. I've been working on {problem}, and I can see some changes. It's not easy, but I'm trying.",
        f"I'm {age}, and I know this is important. I've been making changes, and I can feel the difference. But I still have days where it's really hard."
        if age >= 35
        else f"I've been working on this. I'm {age}, and I know I need to stick with it. Some days I feel good about it, other days I struggle.",
        f"I'm actively working on {problem}. I've made some changes already, and I'm trying to keep going. It's not perfect, but I'm doing the work.",
        f"I've been trying different things to address {problem}. Some strategies work better than others. I'm learning what helps and what doesn't.",
        f"I'm in the middle of making changes. {complaint}, and I'm working on it every day. It's a process, but I'm committed.",
    ]


def _maintenance(job: str, age: int, problem: str, complaint: str) -> list[str]:
    return [
        f"I'm {age}, and I've been maintaining these changes for a while now. I know what my triggers are, especially with work, and I have strategies that work for me."
        if age >= 40
        else f"I've been doing well. I'm {age}, and I've learned a lot about myself through this process. I feel confident, but I stay vigilant.",
        f"I've got this under control. Working as a {job}, I know what situations are risky for me, and I have a plan. I feel good about where I am."
        if job
        else "I feel good about the changes I've made. I know what works for me now, and I'm confident I can keep this up.",
        f"I've been maintaining this for a while. {problem} isn't controlling my life anymore. I have tools and strategies that work.",
        f"I feel confident, but I don't take it for granted. I know {problem} could come back if I'm not careful, but I've got a plan.",
        f"I've come a long way. {complaint}, but now I feel like I'm in control. I know what to watch for, and I'm prepared.",
    ]


STAGE_BANKS: dict[StageOfChange, Callable[[str, int, str, str], list[str]]] = {
    StageOfChange.PRECONTEMPLATION: _precontemplation,
    StageOfChange.CONTEMPLATION: _contemplation,
    StageOfChange.PREPARATION: _preparation,
    StageOfChange.ACTION: _action,
    StageOfChange.MAINTENANCE: _maintenance,
}


def stage_responses(patient: PatientProfile) -> list[str]:
    """Build the personalised reply bank for the patient's stage of change."""
    build = STAGE_BANKS[patient.stage_of_change]
    return build(
        extract_job(patient.background),
        patient.age,
        patient.presenting_problem.lower().rstrip("."),
        patient.chief_complaint.split(".")[0],
    )


# ── Public API ───────────────────────────────────────────────────────────────


def respond(utterance: str, patient: PatientProfile | None = None) -> str:
    """Return a canned, lightly personalised patient reply.

    Args:
        utterance: The clinician's latest message.
        patient: Active patient profile. Without one a generic reply is used.

    Returns:
        A non-empty reply string.
    """
    utterance = utterance or ""
    index = utterance_hash(utterance)

    if patient is None:
        return GENERIC_RESPONSES[index % len(GENERIC_RESPONSES)]

    bank = stage_responses(patient)
    intent = classify_intent(utterance)
    reply = ensure_answers_question_first(bank[index % len(bank)], intent, patient)
    logger.debug(
        "Mock reply stage=%s intent=%s index=%d",
        patient.stage_of_change.value,
        intent.value,
        index % len(bank),
    )
    return reply


class MockPatientResponder:
    """Patient responder backed by the canned reply banks.

    Stands in for a live language-model responder; ``source`` tells callers
    which kind produced the reply.
    """

    source = "mock"

    def reply(
        self, message: str, patient: PatientProfile | None = None
    ) -> tuple[str, ClinicianIntent]:
        """Return (reply, classified intent) for a clinician message."""
        return respond(message, patient), classify_intent(message)
