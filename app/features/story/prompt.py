# app/features/story/prompt.py
from typing import List


def _skeleton(language: str, glossary_language: str) -> str:
    return f"""{{
  "title": "Creative title in {language}",
  "content": "Full story here (350-500 words)...",
  "level": "beginner | intermediate | advanced",
  "estimatedReadingMinutes": 5,
  "category": "Story category",
  "questions": [
    {{
      "id": "q1",
      "question": "Comprehension question 1?",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "explanation": "Brief explanation"
    }}
  ],
  "glossary": {{
    "word from the story": "Short definition in {glossary_language}"
  }}
}}"""


def build_story_prompt(
    *,
    language: str,
    theme: str,
    keywords: List[str],
    context: str = "",
    category: str = "",
    level: str = "",
    glossary_language: str = "",
) -> str:
    glossary_language = glossary_language or language
    elements = f"Include these elements: {', '.join(keywords)}" if keywords else ""
    category_line = f"Category: {category}" if category else ""
    level_line = f"Reader level: {level}" if level else ""

    if context.strip():
        opening = f"""CONTEXT PROVIDED BY USER: "{context.strip()}"

Based on this context, write an ORIGINAL story in {language}.
Main theme: {theme}

Requirements:
1. Stay true to the provided context while adding creativity
2. Develop characters and plot"""
    else:
        opening = f"""Write an ORIGINAL story in {language} about: {theme}

Requirements:
1. Engaging plot with clear beginning, middle and end
2. Vocabulary suited to language learners"""

    return f"""
{opening}
3. Exactly 10 comprehension questions with 4 options each; "correctAnswer" is the 0-based index of the right option
4. A glossary of 20-35 words taken from the story, with definitions written in {glossary_language}
{elements}
{category_line}
{level_line}

Respond ONLY with valid JSON in this shape:
{_skeleton(language, glossary_language)}""".strip()
