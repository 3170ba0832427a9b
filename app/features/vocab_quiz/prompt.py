# app/features/vocab_quiz/prompt.py
from typing import List, Tuple


def build_vocab_quiz_prompt(*, words: List[Tuple[str, str]], language: str, count: int) -> str:
    listing = "\n".join(f"- {w} ({lang})" for w, lang in words)
    return f"""
You are a language teacher writing a vocabulary quiz.

WORDS TO PRACTICE:
{listing}

INSTRUCTIONS:
1. Write exactly {count} multiple-choice questions in {language}; spread them across all the words
2. Mix meaning, translation, usage-in-context and synonym questions
3. Each question has exactly 4 options and "correctAnswer" is the 0-based index of the right option
4. Wrong options must be plausible

Respond ONLY with valid JSON in this shape:
{{
  "questions": [
    {{
      "id": "v1",
      "word": "the word being tested",
      "question": "Question text?",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "explanation": "Brief explanation"
    }}
  ]
}}""".strip()
