"""Quiz generation route."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_quiz_generator
from api.v1.schemas.quiz import QuizRequest, QuizResponse
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.quiz_service import QuizGenerator

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.post("", response_model=QuizResponse, summary="Generate a quiz")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def generate_quiz(
    request: Request,
    body: QuizRequest,
    user: CurrentUser,
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> QuizResponse:
    """Run the prompt against the configured model.

    Upstream failures are reported in the body with ``status="error"``.
    """
    result = await generator.generate(body.prompt)
    return QuizResponse(status=generator.status.value, result=result)
