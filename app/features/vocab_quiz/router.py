# app/features/vocab_quiz/router.py
from fastapi import APIRouter, Depends

from app.logger import get_logger
from app.lib.errors import StoryApiError, UpstreamError
from app.lib.rate_limit import enforce_rate_limit
from .schemas import VocabQuizRequest, VocabQuizResponse
from .service import generate_vocab_quiz

router = APIRouter(prefix="/api", tags=["vocab-quiz"])
log = get_logger(__name__)

@router.post(
    "/generate-vocab-quiz",
    response_model=VocabQuizResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def vocab_quiz_endpoint(req: VocabQuizRequest) -> VocabQuizResponse:
    try:
        return await generate_vocab_quiz(req)
    except StoryApiError:
        raise
    except Exception as e:
        log.exception("vocab quiz generation failed")
        raise UpstreamError(details=str(e), error="Failed to generate vocabulary quiz") from e
