# app/lib/json_tools.py
import json
import re
from typing import Any, Optional

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", flags=re.DOTALL | re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{.*\}", flags=re.DOTALL)


def _try_load(s: str) -> Optional[Any]:
    try:
        return json.loads(s)
    except (ValueError, TypeError):
        return None


def extract_json_value(text: str) -> Optional[Any]:
    """
    Parse model output that should be JSON but may be wrapped in prose or fences.
    Tries, in order: the whole text, the first fenced code block, and the
    first '{' .. last '}' span. Returns None when nothing parses.
    """
    if not text:
        return None
    s = text.strip()

    value = _try_load(s)
    if value is not None:
        return value

    m = _FENCE_RE.search(s)
    if m:
        value = _try_load(m.group(1))
        if value is not None:
            return value

    m = _OBJECT_RE.search(s)
    if m:
        return _try_load(m.group(0))
    return None


def extract_json_object(text: str) -> Optional[dict]:
    value = extract_json_value(text)
    return value if isinstance(value, dict) else None
