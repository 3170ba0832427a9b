# app/schemas.py
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# required text: surrounding whitespace stripped, empty rejected
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class ApiModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class Question(ApiModel):
    id: str
    question: str
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_answer: int = Field(0, ge=0, le=3)
    explanation: str = ""

class GenerationMeta(ApiModel):
    generated_at: str
    model: str
    tokens_used: int = 0
    processing_time: str
    mode: Optional[str] = None
    language: Optional[str] = None
