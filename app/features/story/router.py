# app/features/story/router.py
from fastapi import APIRouter, Depends

from app.logger import get_logger
from app.lib.errors import StoryApiError, UpstreamError
from app.lib.rate_limit import enforce_rate_limit
from .schemas import StoryRequest, StoryResponse
from .service import generate_story

router = APIRouter(prefix="/api", tags=["story"])
log = get_logger(__name__)

@router.post(
    "/generate-story",
    response_model=StoryResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def generate_story_endpoint(req: StoryRequest) -> StoryResponse:
    try:
        return await generate_story(req)
    except StoryApiError:
        raise
    except Exception as e:
        log.exception("story generation failed")
        raise UpstreamError(details=str(e)) from e
