# app/features/vocab_quiz/schemas.py
from pydantic import Field
from typing import List, Optional

from app.schemas import ApiModel, GenerationMeta, NonBlankStr, Question

class VocabWord(ApiModel):
    word: NonBlankStr
    language: NonBlankStr = Field(..., description="Language the word belongs to")

class VocabQuizRequest(ApiModel):
    words: List[VocabWord] = Field(..., min_length=1)
    language: Optional[str] = Field(None, description="Interface language for questions; defaults to the first word's language")

class VocabQuiz(ApiModel):
    id: str
    language: str
    words: List[str]
    questions: List[Question]

class VocabQuizResponse(ApiModel):
    success: bool = True
    data: VocabQuiz
    meta: GenerationMeta
