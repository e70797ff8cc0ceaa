"""Practice chat API routes."""

import logging

from fastapi import APIRouter, Depends

from mi_coach.dependencies import get_responder
from mi_coach.schemas import ChatRequest, ChatResponse
from mi_coach.services.mock_responder import MockPatientResponder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    responder: MockPatientResponder = Depends(get_responder),
) -> ChatResponse:
    """Return the simulated patient's reply to a clinician message."""
    reply, intent = responder.reply(request.message, request.patient)
    logger.info(
        "Chat reply intent=%s source=%s patient=%s",
        intent.value,
        responder.source,
        request.patient.topic if request.patient else None,
    )
    return ChatResponse(reply=reply, intent=intent, source=responder.source)
