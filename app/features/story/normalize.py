# app/features/story/normalize.py
from __future__ import annotations

import math
import uuid
from typing import Any, Optional

from app.logger import get_logger
from app.lib.json_tools import extract_json_object
from app.lib.language import LanguagePack, language_pack
from app.lib.quiz import as_text, normalize_questions
from app.schemas import Question
from .glossary import enrich_glossary
from .schemas import NormalizedStory, StoryRequest

log = get_logger(__name__)

STORY_QUESTION_COUNT = 10
WORDS_PER_MINUTE = 50
MIN_READING_MINUTES = 5
MAX_READING_MINUTES = 15


def new_story_id() -> str:
    return f"story_{uuid.uuid4().hex[:16]}"


def estimate_reading_minutes(content: str) -> int:
    minutes = math.ceil(len(content.split()) / WORDS_PER_MINUTE)
    return max(MIN_READING_MINUTES, min(MAX_READING_MINUTES, minutes))


def _reading_minutes(value: Any, content: str) -> int:
    if not isinstance(value, bool):
        try:
            minutes = int(float(value))
        except (TypeError, ValueError, OverflowError):
            minutes = 0
        if minutes > 0:
            return minutes
    return estimate_reading_minutes(content)


def placeholder_question(n: int, pack: LanguagePack) -> Question:
    return Question(
        id=f"q{n}",
        question=pack.placeholder_question.format(n=n),
        options=[pack.option(i) for i in range(4)],
        correct_answer=0,
        explanation=pack.placeholder_explanation,
    )


def normalize_story(raw_text: str, req: StoryRequest, *, story_id: Optional[str] = None) -> NormalizedStory:
    """
    Reshape whatever the model returned into the fixed story contract.
    Never raises on malformed model output: unparseable text becomes the story
    content, and every missing field gets a language-appropriate default.
    """
    pack = language_pack(req.language)

    data = extract_json_object(raw_text)
    if data is None:
        log.warning("model output had no JSON object; using the raw text as story content")
        data = {
            "title": pack.story_title(req.theme),
            "content": raw_text or "",
            "questions": [],
            "glossary": {},
        }

    content = as_text(data.get("content")) or as_text(data.get("story"))
    questions = normalize_questions(
        data.get("questions"),
        count=STORY_QUESTION_COUNT,
        pack=pack,
        placeholder=lambda n: placeholder_question(n, pack),
    )

    return NormalizedStory(
        id=story_id or new_story_id(),
        title=as_text(data.get("title")) or pack.story_title(req.theme),
        content=content,
        level=as_text(data.get("level")) or req.level.strip() or pack.default_level,
        estimated_reading_minutes=_reading_minutes(data.get("estimatedReadingMinutes"), content),
        category=as_text(data.get("category")) or req.category.strip() or pack.default_category,
        language=pack.code,
        questions=questions,
        glossary=enrich_glossary(data.get("glossary"), content, pack),
    )
