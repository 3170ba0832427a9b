# app/lib/quiz.py
from __future__ import annotations

import math
import re
from typing import Any, Callable, List

from app.lib.language import LanguagePack
from app.schemas import Question

OPTION_COUNT = 4

# "B", "b", "B)", "(b)", "B.", "B:"
_LETTER_RE = re.compile(r"^\(?([a-d])[\).:]?$", flags=re.IGNORECASE)


def as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _clamp(i: int) -> int:
    return max(0, min(OPTION_COUNT - 1, i))


def normalize_answer_index(value: Any) -> int:
    """
    0-3 ints, 'A'-'D' letters (any case) and numeric strings all map to 0..3.
    Out-of-range numbers are clamped; anything unparseable is 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return _clamp(value)
    if isinstance(value, float):
        return _clamp(int(value)) if math.isfinite(value) else 0
    if isinstance(value, str):
        s = value.strip()
        m = _LETTER_RE.match(s)
        if m:
            return "abcd".index(m.group(1).lower())
        try:
            return _clamp(int(float(s)))
        except (ValueError, OverflowError):
            return 0
    return 0


def raw_answer(q: dict) -> Any:
    # correctAnswer wins when both keys are present
    if q.get("correctAnswer") is not None:
        return q["correctAnswer"]
    return q.get("correct")


def normalize_options(raw: Any, pack: LanguagePack) -> List[str]:
    if isinstance(raw, dict):
        items = list(raw.values())
    elif isinstance(raw, list):
        items = raw
    else:
        items = []
    options = [as_text(o) for o in items[:OPTION_COUNT]]
    options = [o or pack.option(i) for i, o in enumerate(options)]
    while len(options) < OPTION_COUNT:
        options.append(pack.option(len(options)))
    return options


def normalize_question(raw: dict, n: int, pack: LanguagePack) -> Question:
    qid = as_text(raw.get("id")) or f"q{n}"
    text = as_text(raw.get("question")) or as_text(raw.get("text")) or pack.question_fallback.format(n=n)
    return Question(
        id=qid,
        question=text,
        options=normalize_options(raw.get("options"), pack),
        correct_answer=normalize_answer_index(raw_answer(raw)),
        explanation=as_text(raw.get("explanation")),
    )


def normalize_questions(
    raw: Any,
    *,
    count: int,
    pack: LanguagePack,
    placeholder: Callable[[int], Question],
) -> List[Question]:
    """
    Exactly `count` questions: non-object entries are dropped, the first
    `count` objects are normalized, and the rest is filled by `placeholder(n)`
    with n numbered from 1.
    """
    items = [q for q in raw if isinstance(q, dict)] if isinstance(raw, list) else []
    questions = [normalize_question(q, n, pack) for n, q in enumerate(items[:count], start=1)]
    for n in range(len(questions) + 1, count + 1):
        questions.append(placeholder(n))
    return questions
