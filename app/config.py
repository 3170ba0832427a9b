# app/config.py
import os
from dataclasses import dataclass
from typing import List

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

@dataclass(frozen=True)
class Config:
    # DeepSeek (OpenAI-compatible)
    deepseek_api_key: str
    deepseek_base_url: str
    deepseek_model: str
    llm_timeout_seconds: float
    llm_temperature: float
    story_max_tokens: int
    vocab_max_tokens: int
    # API / CORS
    allowed_origins: List[str]
    allow_credentials: bool
    # Rate limiting (per client IP, fixed window)
    rate_limit_max_requests: int
    rate_limit_window_seconds: int
    trust_proxy_headers: bool  # only behind a proxy that overwrites X-Forwarded-For
    # Logging
    log_level: str
    port: int

def load_config() -> Config:
    return Config(
        deepseek_api_key = os.getenv("DEEPSEEK_API_KEY", ""),
        deepseek_base_url = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1"),
        deepseek_model = os.getenv("DEEPSEEK_MODEL", "deepseek-chat"),
        llm_timeout_seconds = float(os.getenv("LLM_TIMEOUT_SECONDS", "55")),
        llm_temperature = float(os.getenv("LLM_TEMPERATURE", "0.7")),
        story_max_tokens = int(os.getenv("STORY_MAX_TOKENS", "4000")),
        vocab_max_tokens = int(os.getenv("VOCAB_MAX_TOKENS", "3000")),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        allow_credentials = _env_bool("ALLOW_CREDENTIALS", False),
        rate_limit_max_requests = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "30")),
        rate_limit_window_seconds = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "3600")),
        trust_proxy_headers = _env_bool("TRUST_PROXY_HEADERS", False),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
        port = int(os.getenv("PORT", "10000")),
    )

# Load once
config = load_config()
