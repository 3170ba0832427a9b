# app/features/story/schemas.py
from pydantic import Field, field_validator
from typing import Dict, List, Optional

from app.schemas import ApiModel, GenerationMeta, NonBlankStr, Question

class StoryRequest(ApiModel):
    language: NonBlankStr = Field(..., description="Story language, free text (e.g. 'español', 'inglés', 'English')")
    theme: NonBlankStr = Field(..., description="Main story theme")
    keywords: List[str] = Field(default_factory=list, description="Elements the story must include")
    context: str = Field("", description="Optional user-supplied context; switches to context-driven mode")
    category: str = ""
    level: str = ""
    glossary_language: Optional[str] = Field(None, description="Language for glossary definitions")

    @field_validator("keywords", "context", "category", "level", mode="before")
    @classmethod
    def _none_as_empty(cls, v, info):
        if v is None:
            return [] if info.field_name == "keywords" else ""
        return v

class NormalizedStory(ApiModel):
    id: str
    title: str
    content: str
    level: str
    estimated_reading_minutes: int = Field(..., ge=1)
    category: str
    language: str
    questions: List[Question]
    glossary: Dict[str, str] = Field(default_factory=dict)

class StoryResponse(ApiModel):
    success: bool = True
    data: NormalizedStory
    meta: GenerationMeta
