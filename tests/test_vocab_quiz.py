# tests/test_vocab_quiz.py
import json

from app.features.vocab_quiz.schemas import VocabQuizRequest
from app.features.vocab_quiz.service import normalize_vocab_quiz

ENDPOINT = "/api/generate-vocab-quiz"

WORDS = [{"word": "apple", "language": "English"}, {"word": "rocket", "language": "English"}]


def _questions(n):
    return [
        {"id": f"v{i + 1}", "word": "apple", "question": f"Q{i + 1}?", "options": ["a", "b", "c", "d"], "correct": "C"}
        for i in range(n)
    ]


def test_vocab_quiz_end_to_end(client, fake_llm):
    fake_llm.reply_with({"questions": _questions(20)})
    resp = client.post(ENDPOINT, json={"words": WORDS})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    data = body["data"]
    assert len(data["questions"]) == 15
    assert data["questions"][-1]["question"] == "Q15?"
    assert all(q["correctAnswer"] == 2 for q in data["questions"])
    assert data["language"] == "en"
    assert data["words"] == ["apple", "rocket"]
    assert "apple (English)" in fake_llm.calls[0]["messages"][1]["content"]


def test_short_quiz_padded_with_word_placeholders():
    req = VocabQuizRequest(words=WORDS, language="español")
    quiz = normalize_vocab_quiz(json.dumps({"questions": _questions(12)}), req)
    assert len(quiz.questions) == 15
    assert quiz.language == "es"
    assert quiz.questions[12].question == "¿Qué significa “apple”?"
    assert quiz.questions[13].question == "¿Qué significa “rocket”?"
    assert quiz.questions[14].id == "v15"
    assert quiz.questions[14].options == ["Opción A", "Opción B", "Opción C", "Opción D"]


def test_bare_array_reply_accepted():
    req = VocabQuizRequest(words=WORDS)
    quiz = normalize_vocab_quiz(json.dumps(_questions(15)), req)
    assert [q.question for q in quiz.questions] == [f"Q{i}?" for i in range(1, 16)]


def test_prose_reply_gives_placeholders(client, fake_llm):
    fake_llm.reply_with("Sorry, I cannot do that.")
    resp = client.post(ENDPOINT, json={"words": WORDS})
    assert resp.status_code == 200
    questions = resp.json()["data"]["questions"]
    assert len(questions) == 15
    assert questions[0]["question"] == "What does “apple” mean?"


def test_empty_word_list_is_400(client, fake_llm):
    resp = client.post(ENDPOINT, json={"words": []})
    assert resp.status_code == 400
    assert resp.json()["field"] == "words"
    assert fake_llm.calls == []


def test_word_entries_need_language(client):
    resp = client.post(ENDPOINT, json={"words": [{"word": "apple"}]})
    assert resp.status_code == 400
    assert resp.json()["field"] == "words.0.language"


def test_blank_word_is_400(client, fake_llm):
    resp = client.post(ENDPOINT, json={"words": [{"word": "   ", "language": "English"}]})
    assert resp.status_code == 400
    assert resp.json()["field"] == "words.0.word"
    assert fake_llm.calls == []


def test_words_are_trimmed():
    req = VocabQuizRequest(words=[{"word": "  apple ", "language": "English"}])
    quiz = normalize_vocab_quiz("no json here", req)
    assert quiz.words == ["apple"]
    assert quiz.questions[0].question == "What does “apple” mean?"
