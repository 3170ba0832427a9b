# app/features/vocab_quiz/service.py
import time
import uuid
from datetime import datetime, timezone
from typing import List

from app.config import config
from app.logger import get_logger
from app.lib.json_tools import extract_json_value
from app.lib.language import LanguagePack, language_pack
from app.lib.llm_client import complete
from app.lib.quiz import normalize_questions
from app.schemas import GenerationMeta, Question
from .prompt import build_vocab_quiz_prompt
from .schemas import VocabQuiz, VocabQuizRequest, VocabQuizResponse

log = get_logger(__name__)

VOCAB_QUESTION_COUNT = 15

SYSTEM = (
    "You are a precise vocabulary teacher. "
    "Return STRICT JSON only — exactly one JSON object with a 'questions' array. "
    "No extra text, no comments, no markdown."
)

def vocab_placeholder(n: int, words: List[str], pack: LanguagePack) -> Question:
    word = words[(n - 1) % len(words)]
    return Question(
        id=f"v{n}",
        question=pack.vocab_placeholder_question.format(word=word),
        options=[pack.option(i) for i in range(4)],
        correct_answer=0,
        explanation="",
    )

def normalize_vocab_quiz(raw_text: str, req: VocabQuizRequest) -> VocabQuiz:
    pack = language_pack(req.language or req.words[0].language)
    words = [w.word.strip() for w in req.words]

    data = extract_json_value(raw_text)
    if isinstance(data, list):
        raw_questions = data
    elif isinstance(data, dict):
        raw_questions = data.get("questions")
    else:
        log.warning("vocab quiz output had no JSON; padding with placeholders")
        raw_questions = []

    questions = normalize_questions(
        raw_questions,
        count=VOCAB_QUESTION_COUNT,
        pack=pack,
        placeholder=lambda n: vocab_placeholder(n, words, pack),
    )
    return VocabQuiz(
        id=f"vocab_{uuid.uuid4().hex[:16]}",
        language=pack.code,
        words=words,
        questions=questions,
    )

async def generate_vocab_quiz(req: VocabQuizRequest) -> VocabQuizResponse:
    started = time.perf_counter()
    interface_language = req.language or req.words[0].language
    log.info(f"generating vocab quiz for {len(req.words)} words ({interface_language})")

    prompt = build_vocab_quiz_prompt(
        words=[(w.word, w.language) for w in req.words],
        language=interface_language,
        count=VOCAB_QUESTION_COUNT,
    )
    completion = await complete(prompt, system=SYSTEM, max_tokens=config.vocab_max_tokens)
    quiz = normalize_vocab_quiz(completion.text, req)

    elapsed = time.perf_counter() - started
    return VocabQuizResponse(
        data=quiz,
        meta=GenerationMeta(
            generated_at=datetime.now(timezone.utc).isoformat(),
            model=completion.model,
            tokens_used=completion.tokens_used,
            processing_time=f"{elapsed:.2f}s",
            language=quiz.language,
        ),
    )
