"""Session feedback API routes."""

from fastapi import APIRouter

from mi_coach.schemas import Feedback, FeedbackRequest
from mi_coach.services.feedback import generate_feedback

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=Feedback, response_model_exclude_none=True)
async def create_feedback(request: FeedbackRequest) -> Feedback:
    """Generate coaching feedback for a finished session transcript."""
    return generate_feedback(request.transcript, request.tier)
