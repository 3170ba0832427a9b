# app/features/story/service.py
import time
from datetime import datetime, timezone

from app.config import config
from app.logger import get_logger
from app.lib.llm_client import complete
from app.schemas import GenerationMeta
from .normalize import normalize_story
from .prompt import build_story_prompt
from .schemas import StoryRequest, StoryResponse

log = get_logger(__name__)

SYSTEM = (
    "You are a creative writer of graded stories for language learners. "
    "Return STRICT JSON only — exactly one JSON object with the keys "
    "'title', 'content', 'level', 'estimatedReadingMinutes', 'category', 'questions' and 'glossary'. "
    "No extra text, no comments, no markdown."
)

async def generate_story(req: StoryRequest) -> StoryResponse:
    started = time.perf_counter()
    mode = "context" if req.context.strip() else "theme"
    log.info(f"generating {mode}-driven story: {req.language} - {req.theme[:50]}")

    prompt = build_story_prompt(
        language=req.language,
        theme=req.theme,
        keywords=req.keywords,
        context=req.context,
        category=req.category,
        level=req.level,
        glossary_language=req.glossary_language or "",
    )
    completion = await complete(prompt, system=SYSTEM, max_tokens=config.story_max_tokens)
    story = normalize_story(completion.text, req)

    elapsed = time.perf_counter() - started
    log.info(f"story {story.id} ready in {elapsed:.2f}s ({completion.tokens_used} tokens)")
    return StoryResponse(
        data=story,
        meta=GenerationMeta(
            generated_at=datetime.now(timezone.utc).isoformat(),
            model=completion.model,
            tokens_used=completion.tokens_used,
            processing_time=f"{elapsed:.2f}s",
            mode=mode,
            language=story.language,
        ),
    )
