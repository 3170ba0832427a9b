# app/features/story/glossary.py
from __future__ import annotations

import re
from collections import Counter
from typing import Any, Dict, Iterable, List, Tuple

from app.lib.language import LanguagePack

GLOSSARY_TARGET_MIN = 20
GLOSSARY_FILL_MAX = 30
MIN_DEFINITION_LENGTH = 3
MIN_WORD_LENGTH = 4
CONTEXT_WINDOW = 30

_SPLIT_RE = re.compile(r"[\s\-‐–—/]+")
_STRIP_RE = re.compile(r"[\W_]+")


def clean_glossary(raw: Any) -> Dict[str, str]:
    """
    Accepts {word: definition} or [{"word": ..., "definition": ...}].
    Keys are trimmed and lower-cased; short or non-string definitions are dropped.
    """
    items: Iterable[Tuple[Any, Any]]
    if isinstance(raw, dict):
        items = raw.items()
    elif isinstance(raw, list):
        items = (
            (e.get("word") or e.get("term"), e.get("definition") or e.get("meaning"))
            for e in raw if isinstance(e, dict)
        )
    else:
        return {}

    out: Dict[str, str] = {}
    for word, definition in items:
        if not isinstance(word, str) or not isinstance(definition, str):
            continue
        key = word.strip().lower()
        text = definition.strip()
        if not key or len(text) < MIN_DEFINITION_LENGTH:
            continue
        out.setdefault(key, text)
    return out


def candidate_words(content: str, pack: LanguagePack, exclude: Iterable[str] = ()) -> List[str]:
    """Content words by frequency, most frequent first; ties keep first-seen order."""
    excluded = set(exclude)
    counts: Counter = Counter()
    for token in _SPLIT_RE.split(content.lower()):
        word = _STRIP_RE.sub("", token)
        if len(word) < MIN_WORD_LENGTH or any(c.isdigit() for c in word):
            continue
        if word in pack.stop_words or word in excluded:
            continue
        counts[word] += 1
    # Counter keeps insertion order and sorted() is stable
    return [w for w, _ in sorted(counts.items(), key=lambda kv: -kv[1])]


def context_definition(word: str, content: str, pack: LanguagePack) -> str:
    m = re.search(rf"\b{re.escape(word)}\b", content, flags=re.IGNORECASE) \
        or re.search(re.escape(word), content, flags=re.IGNORECASE)
    if not m:
        return pack.glossary_fallback_definition
    start = max(0, m.start() - CONTEXT_WINDOW)
    snippet = " ".join(content[start:m.end() + CONTEXT_WINDOW].split())
    return pack.glossary_definition.format(snippet=snippet)


def enrich_glossary(raw: Any, content: str, pack: LanguagePack) -> Dict[str, str]:
    glossary = clean_glossary(raw)
    if len(glossary) >= GLOSSARY_TARGET_MIN:
        return glossary
    for word in candidate_words(content, pack, exclude=glossary):
        if len(glossary) >= GLOSSARY_FILL_MAX:
            break
        glossary[word] = context_definition(word, content, pack)
    return glossary
