# app/lib/errors.py
from __future__ import annotations

from typing import Any, Dict, Optional


class StoryApiError(Exception):
    """
    Base for every error that maps to a caller-visible response.
    Rendered as {"success": false, "error": ..., **extra} with `status_code`.
    """
    status_code: int = 500
    error: str = "Internal error"

    def __init__(self, error: Optional[str] = None, **extra: Any):
        self.error = error or self.error
        self.extra: Dict[str, Any] = {k: v for k, v in extra.items() if v is not None}
        super().__init__(self.error)

    def to_payload(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error, **self.extra}


class InvalidRequestError(StoryApiError):
    status_code = 400
    error = "Invalid request"


class RateLimitExceededError(StoryApiError):
    status_code = 429
    error = "Rate limit reached"


class MissingApiKeyError(StoryApiError):
    status_code = 500
    error = "API key not configured"

    def __init__(self):
        super().__init__(solution="Set DEEPSEEK_API_KEY in the service environment")


class UpstreamTimeoutError(StoryApiError):
    status_code = 504
    error = "DeepSeek timeout (took too long)"

    def __init__(self):
        super().__init__(suggestion="Try with a simpler story or fewer keywords")


class InsufficientBalanceError(StoryApiError):
    status_code = 402
    error = "Insufficient DeepSeek balance"

    def __init__(self):
        super().__init__(solution="Add credit at platform.deepseek.com")


class UpstreamAuthError(StoryApiError):
    status_code = 401
    error = "Invalid DeepSeek API key"

    def __init__(self):
        super().__init__(solution="Check DEEPSEEK_API_KEY")


class UpstreamRateLimitError(StoryApiError):
    status_code = 429
    error = "DeepSeek rate limit reached"

    def __init__(self):
        super().__init__(suggestion="Wait a moment and try again")


class UpstreamError(StoryApiError):
    status_code = 500
    error = "Failed to generate story"

    def __init__(self, details: Optional[str] = None, error: Optional[str] = None):
        super().__init__(error, details=details)
