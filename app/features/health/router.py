# app/features/health/router.py
from datetime import datetime, timezone

from fastapi import APIRouter

from app.config import config

router = APIRouter(tags=["health"])

@router.get("/")
async def root() -> dict:
    return {
        "status": "online",
        "service": "Story Generator API",
        "timeout": f"{int(config.llm_timeout_seconds)} seconds",
        "endpoints": {
            "generateStory": "POST /api/generate-story",
            "generateVocabQuiz": "POST /api/generate-vocab-quiz",
            "health": "GET /health",
        },
    }

@router.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "note": "DeepSeek Story Generator API",
    }
